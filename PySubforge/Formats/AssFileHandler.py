import logging

import pysubs2

from PySubforge.Helpers.Time import FormatCentisecondTimestamp
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import SubtitleParseError
from PySubforge.SubtitleFileHandler import SubtitleFileHandler


class AssFileHandler(SubtitleFileHandler):
    """
    File handler for Advanced SubStation Alpha (ASS/SSA) subtitles.

    Exports use a fixed script header with a single Default style. Reading is done with pysubs2,
    keeping only the dialogue text and timing.
    """

    SUPPORTED_EXTENSIONS = {'.ass': 10, '.ssa': 5}
    MIME_TYPE = 'text/x-ssa'

    HEADER = (
        "[Script Info]\n"
        "Title: SubtitleForge Export\n"
        "ScriptType: v4.00+\n"
        "PlayResX: 1920\n"
        "PlayResY: 1080\n"
        "\n"
        "[V4+ Styles]\n"
        "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding\n"
        "Style: Default,Arial,48,&H00FFFFFF,&H000000FF,&H00000000,&H64000000,-1,0,0,0,100,100,0,0,1,2,1,2,10,10,40,1\n"
        "\n"
        "[Events]\n"
        "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
    )

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse ASS/SSA string content. Comment events are ignored.
        """
        try:
            subs = pysubs2.SSAFile.from_string(content)

        except Exception as e:
            raise SubtitleParseError(f"Failed to parse ASS content: {e}", e)

        entries : list[SubtitleEntry] = []
        for event in subs:
            if event.is_comment:
                continue
            entries.append(SubtitleEntry(start=max(0, event.start), end=max(0, event.end), text=event.plaintext, number=len(entries) + 1))

        metadata = { 'title': subs.info.get('Title') } if subs.info.get('Title') else {}

        logging.debug(f"Read {len(entries)} dialogue events")
        return SubtitleData(entries=entries, metadata=metadata, detected_format='.ass')

    def compose(self, data: SubtitleData) -> str:
        """
        Compose subtitle entries into ASS format string.

        Times are written with centisecond precision (truncated) and newlines become \\N.
        """
        events = []
        for entry in data.entries:
            start = FormatCentisecondTimestamp(entry.start)
            end = FormatCentisecondTimestamp(entry.end)
            text = entry.text.replace('\n', '\\N')
            events.append(f"Dialogue: 0,{start},{end},Default,,0,0,0,,{text}")

        return self.HEADER + '\n'.join(events)
