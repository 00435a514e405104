from PySubforge.Options import Options
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import (
    InvalidDurationError,
    LineTooLongError,
    OverlappingEntryError,
    SubtitleValidationError,
)

class SubtitleValidator:
    """
    Advisory checks on subtitle entries.

    Problems are returned as a list of SubtitleValidationError, each referring to the entry concerned.
    Nothing is raised and the entries are not modified.
    """
    def __init__(self, options : Options|None = None) -> None:
        self.options = options or Options()

    def ValidateEntries(self, entries : list[SubtitleEntry]) -> list[SubtitleValidationError]:
        """
        Check every entry for invalid duration, overlap with its predecessor and overlong lines
        """
        errors : list[SubtitleValidationError] = []
        max_characters = self.options.max_characters

        previous : SubtitleEntry|None = None
        for entry in entries:
            duration_error = self.ValidateDuration(entry)
            if duration_error:
                errors.append(duration_error)

            if previous is not None:
                overlap_error = self.ValidateOverlap(previous, entry)
                if overlap_error:
                    errors.append(overlap_error)

            if max_characters:
                length_error = self.ValidateLineLength(entry, max_characters)
                if length_error:
                    errors.append(length_error)

            previous = entry

        return errors

    def ValidateDuration(self, entry : SubtitleEntry) -> InvalidDurationError|None:
        if entry.duration <= 0:
            return InvalidDurationError(f"Subtitle {entry.number} ends at or before it starts", entry)
        return None

    def ValidateOverlap(self, previous : SubtitleEntry, entry : SubtitleEntry) -> OverlappingEntryError|None:
        """
        Only the immediately preceding entry is considered
        """
        if entry.start < previous.end:
            return OverlappingEntryError(f"Subtitle {entry.number} starts before subtitle {previous.number} ends", entry, previous)
        return None

    def ValidateLineLength(self, entry : SubtitleEntry, max_characters : int) -> LineTooLongError|None:
        longest = entry.longest_line
        if longest > max_characters:
            return LineTooLongError(f"Subtitle {entry.number} has a line of {longest} characters (max {max_characters})", entry)
        return None

    def GetOverlappingEntries(self, entries : list[SubtitleEntry]) -> list[SubtitleEntry]:
        """
        Entries that start before the preceding entry ends
        """
        return [ entry for previous, entry in zip(entries, entries[1:]) if self.ValidateOverlap(previous, entry) ]

    def GetInvalidDurationEntries(self, entries : list[SubtitleEntry]) -> list[SubtitleEntry]:
        return [ entry for entry in entries if self.ValidateDuration(entry) ]
