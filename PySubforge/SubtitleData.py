from __future__ import annotations

from typing import Any

from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import SubtitleParseError

class SubtitleData:
    """
    Format-agnostic container for subtitle entries and file-level metadata.

    Attributes:
        entries (list[SubtitleEntry]): Subtitle entries in document order
        metadata (dict[str, Any]): File-level metadata extracted from or required by specific formats
        detected_format (str|None): Optional detected file format/extension (e.g. '.srt')
        diagnostics (list[SubtitleParseError]): Blocks that were skipped while parsing, and why
    """

    def __init__(self, entries : list[SubtitleEntry]|None = None, metadata : dict[str, Any]|None = None, detected_format : str|None = None, diagnostics : list[SubtitleParseError]|None = None):
        self.entries : list[SubtitleEntry] = entries or []
        self.metadata : dict[str, Any] = metadata or {}
        self.detected_format : str|None = detected_format
        self.diagnostics : list[SubtitleParseError] = diagnostics or []
