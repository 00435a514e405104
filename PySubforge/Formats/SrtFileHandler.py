import logging

from PySubforge.Helpers.Parse import ParseSubtitleBlocks
from PySubforge.Helpers.Time import FormatTimestamp, TimestampDialect
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleFileHandler import SubtitleFileHandler

class SrtFileHandler(SubtitleFileHandler):
    """
    File handler for SRT subtitle format.

    Parsing is lenient: blocks without a valid timing line are skipped and reported as diagnostics,
    and WebVTT style timestamps are accepted and normalised.
    """

    SUPPORTED_EXTENSIONS = {'.srt': 10}
    MIME_TYPE = 'application/x-subrip'

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse SRT string content and return SubtitleData with entries and diagnostics.
        """
        entries, diagnostics = ParseSubtitleBlocks(content)
        if diagnostics:
            logging.warning(f"Skipped {len(diagnostics)} invalid subtitle block(s)")

        return SubtitleData(entries=entries, metadata={}, detected_format='.srt', diagnostics=diagnostics)

    def compose(self, data: SubtitleData) -> str:
        """
        Compose subtitle entries into SRT format string.

        Entries are numbered by position, whatever their stored sequence number.
        """
        blocks = []
        for number, entry in enumerate(data.entries, start=1):
            start = FormatTimestamp(entry.start, TimestampDialect.SRT)
            end = FormatTimestamp(entry.end, TimestampDialect.SRT)
            blocks.append(f"{number}\n{start} --> {end}\n{entry.text}")

        return '\n\n'.join(blocks)
