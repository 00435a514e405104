from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySubforge.SubtitleEntry import SubtitleEntry

class SubtitleError(Exception):
    """
    Base class for all errors raised (or reported) by PySubforge
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return str(self.error)
        elif self.message:
            return self.message
        return super().__str__()

class SubtitleParseError(SubtitleError):
    """
    Subtitle content could not be parsed.

    Also used as a diagnostic record for blocks that were skipped by the lenient parsers,
    in which case `block_number` and `block_text` identify the offending block.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None, block_number : int|None = None, block_text : str|None = None):
        super().__init__(message, error)
        self.block_number = block_number
        self.block_text = block_text

    def __str__(self) -> str:
        if self.block_number is not None:
            return f"Block {self.block_number}: {self.message or self.error}"
        return super().__str__()

class MalformedTimestampError(SubtitleParseError):
    """ A timestamp string does not match the strict pattern for its dialect """
    def __init__(self, timestamp : str, message : str|None = None):
        super().__init__(message or f"Malformed timestamp: {timestamp!r}")
        self.timestamp = timestamp

class UnsupportedFormatError(SubtitleError):
    """ An export was requested in a format that has no handler """
    def __init__(self, format_tag : str|None, available : str|None = None):
        message = f"Unsupported subtitle format: {format_tag}"
        if available:
            message = f"{message}. Available formats: {available}"
        super().__init__(message)
        self.format_tag = format_tag

class SubtitleValidationError(SubtitleError):
    """
    Advisory problem with a subtitle entry. These are returned by the validator, never raised.
    """
    def __init__(self, message : str, entry : SubtitleEntry|None = None):
        super().__init__(message)
        self.entry = entry

class InvalidOrderingError(SubtitleValidationError):
    """ Base class for timing problems: end before start, or overlap with the previous entry """
    pass

class InvalidDurationError(InvalidOrderingError):
    """ Entry ends at or before it starts """
    pass

class OverlappingEntryError(InvalidOrderingError):
    """ Entry starts before the preceding entry ends """
    def __init__(self, message : str, entry : SubtitleEntry|None = None, previous : SubtitleEntry|None = None):
        super().__init__(message, entry)
        self.previous = previous

class LineTooLongError(SubtitleValidationError):
    """ A line of the entry text is longer than the character limit """
    pass
