import logging

from PySubforge.Helpers.Parse import ParseSubtitleBlocks, StripWebVttHeader
from PySubforge.Helpers.Time import FormatTimestamp, TimestampDialect
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleFileHandler import SubtitleFileHandler


class VttFileHandler(SubtitleFileHandler):
    """
    WebVTT subtitle format handler.

    Header metadata lines are captured on read. Cue settings, STYLE and NOTE blocks are not preserved.
    """

    SUPPORTED_EXTENSIONS = {'.vtt': 10}
    MIME_TYPE = 'text/vtt'

    HEADER = 'WEBVTT\n\n'

    def parse_string(self, content: str) -> SubtitleData:
        """Parse string content and return SubtitleData with entries and metadata."""
        normalised = content.replace('\r\n', '\n').replace('\r', '\n')
        body, header = StripWebVttHeader(normalised)
        if not header:
            logging.debug("WebVTT content has no WEBVTT signature, parsing as plain cues")

        entries, diagnostics = ParseSubtitleBlocks(body)
        if diagnostics:
            logging.warning(f"Skipped {len(diagnostics)} invalid WebVTT block(s)")

        metadata = { 'header_text': '\n'.join(header) } if header else {}

        return SubtitleData(entries=entries, metadata=metadata, detected_format='.vtt', diagnostics=diagnostics)

    def compose(self, data: SubtitleData) -> str:
        """Compose subtitle entries into WebVTT format string."""
        blocks = []
        for number, entry in enumerate(data.entries, start=1):
            start = FormatTimestamp(entry.start, TimestampDialect.VTT)
            end = FormatTimestamp(entry.end, TimestampDialect.VTT)
            blocks.append(f"{number}\n{start} --> {end}\n{entry.text}")

        return self.HEADER + '\n\n'.join(blocks)
