import regex

from PySubforge.Options import Options
from PySubforge.SettingsType import SettingsType
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleFileHandler import SubtitleFileHandler

_PARAGRAPH_SEPARATOR = regex.compile(r'\n\s*\n')

class TxtFileHandler(SubtitleFileHandler):
    """
    Plain text "subtitles": cue text only, separated by blank lines.

    Exporting discards all timing. Importing lays the paragraphs out back to back using
    the default duration and entry gap from the settings.
    """

    SUPPORTED_EXTENSIONS = {'.txt': 1}
    MIME_TYPE = 'text/plain'

    def __init__(self, settings : SettingsType|None = None):
        super().__init__(settings)
        options = Options(settings)
        self.default_duration = options.default_duration_ms
        self.entry_gap = options.entry_gap_ms

    def parse_string(self, content: str) -> SubtitleData:
        content = content.lstrip('\ufeff').replace('\r\n', '\n').replace('\r', '\n').strip()
        paragraphs = _PARAGRAPH_SEPARATOR.split(content) if content else []

        entries : list[SubtitleEntry] = []
        start = 0
        for number, paragraph in enumerate(paragraphs, start=1):
            end = start + self.default_duration
            entries.append(SubtitleEntry(start=start, end=end, text=paragraph.strip(), number=number))
            start = end + self.entry_gap

        return SubtitleData(entries=entries, metadata={}, detected_format='.txt')

    def compose(self, data: SubtitleData) -> str:
        return '\n\n'.join(entry.text for entry in data.entries)
