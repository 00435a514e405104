import logging

import regex

from PySubforge.Helpers.Time import NormaliseTimestamp, ParseTimestamp, TimestampDialect
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import SubtitleParseError

_WEBVTT_SIGNATURE = regex.compile(r'^WEBVTT(?:[ \t].*)?$')
_BLOCK_SEPARATOR = regex.compile(r'\n\s*\n')
_SEQUENCE_NUMBER = regex.compile(r'^[0-9]+$')

# Either millisecond separator is accepted so that VTT cues inside an SRT file still parse
_TIMING_PATTERN = regex.compile(
    r'^\s*([0-9]{2,}:[0-9]{2}:[0-9]{2}[,.][0-9]{3})\s*-->\s*([0-9]{2,}:[0-9]{2}:[0-9]{2}[,.][0-9]{3})'
)

def HasWebVttSignature(content : str) -> bool:
    """ Does the content start with a WEBVTT signature line? """
    first_line = content.lstrip('\ufeff').lstrip().split('\n', 1)[0].rstrip()
    return bool(_WEBVTT_SIGNATURE.match(first_line))

def StripWebVttHeader(content : str) -> tuple[str, list[str]]:
    """
    Remove the WEBVTT signature and any header metadata lines that follow it.

    Metadata lines are lines containing a colon before the first blank line. They are returned so that
    callers can preserve them.
    """
    if not HasWebVttSignature(content):
        return content, []

    lines = content.lstrip('\ufeff').lstrip().split('\n')
    header = [ lines[0].rstrip() ]
    index = 1
    while index < len(lines):
        line = lines[index].strip()
        if not line or ':' not in line or '-->' in line:
            break
        header.append(line)
        index += 1

    return '\n'.join(lines[index:]), header

def ParseSubtitleBlocks(content : str) -> tuple[list[SubtitleEntry], list[SubtitleParseError]]:
    """
    Parse SRT or WebVTT style content into subtitle entries.

    Parsing is best-effort: blocks that cannot be interpreted are skipped and a diagnostic is
    returned for each of them, rather than failing the whole document.

    Returns:
        (entries, diagnostics): entries in input order, and a SubtitleParseError for each skipped block
    """
    entries : list[SubtitleEntry] = []
    diagnostics : list[SubtitleParseError] = []

    if not content or not content.strip():
        return entries, diagnostics

    content = content.lstrip('\ufeff').replace('\r\n', '\n').replace('\r', '\n')
    content, _ = StripWebVttHeader(content)

    blocks = _BLOCK_SEPARATOR.split(content.strip()) if content.strip() else []

    for block_number, block in enumerate(blocks, start=1):
        try:
            entry = _parse_block(block, len(entries) + 1)
            entries.append(entry)

        except SubtitleParseError as e:
            e.block_number = block_number
            e.block_text = block
            logging.debug(f"Skipping subtitle block: {e}")
            diagnostics.append(e)

    return entries, diagnostics

def _parse_block(block : str, position : int) -> SubtitleEntry:
    """
    Parse a single block: optional sequence number, timing line, then text
    """
    lines = block.strip().split('\n')
    if sum(1 for line in lines if line.strip()) < 2:
        raise SubtitleParseError("Block has fewer than two lines")

    index = 0
    number = position
    if _SEQUENCE_NUMBER.match(lines[0].strip()):
        number = int(lines[0].strip())
        index += 1

    timing = _TIMING_PATTERN.match(lines[index])
    if not timing:
        raise SubtitleParseError(f"Invalid timing line: {lines[index]!r}")

    start = ParseTimestamp(NormaliseTimestamp(timing.group(1)), TimestampDialect.SRT)
    end = ParseTimestamp(NormaliseTimestamp(timing.group(2)), TimestampDialect.SRT)

    text = '\n'.join(lines[index + 1:])

    return SubtitleEntry(start=start, end=end, text=text, number=number)
