from __future__ import annotations

import uuid
from typing import Any

from PySubforge.Helpers.Time import FormatTimestamp, GetDuration, GetTimestamp, TimestampDialect

class SubtitleEntry:
    """
    A single timed cue: start and end in milliseconds, and one or more lines of text.

    `id` is an opaque identifier that stays with the entry through edits.
    `number` is the display ordinal, which is recomputed from position whenever the document is
    renumbered or serialized, so it should never be trusted for export.
    """
    def __init__(self, start : int = 0, end : int = 0, text : str = "", number : int = 0, id : str|None = None):
        self.id : str = id or NewEntryId()
        self.number : int = number
        self.start : int = start
        self.end : int = end
        self.text : str = text or ""

    @classmethod
    def Construct(cls, number : int, start : int|float|str, end : int|float|str, text : str = "", id : str|None = None) -> SubtitleEntry:
        """
        Create an entry, converting start and end to milliseconds if necessary
        """
        return cls(start=GetTimestamp(start), end=GetTimestamp(end), text=text, number=number, id=id)

    @property
    def duration(self) -> int:
        return GetDuration(self.start, self.end)

    @property
    def lines(self) -> list[str]:
        return self.text.split('\n')

    @property
    def longest_line(self) -> int:
        """ Character count of the longest line of text """
        return max(len(line) for line in self.lines)

    @property
    def srt_start(self) -> str:
        return FormatTimestamp(self.start, TimestampDialect.SRT)

    @property
    def srt_end(self) -> str:
        return FormatTimestamp(self.end, TimestampDialect.SRT)

    def SameContent(self, other : SubtitleEntry) -> bool:
        """
        True if the other entry has the same timing and text (identity and number are ignored)
        """
        return (self.start, self.end, self.text) == (other.start, other.end, other.text)

    def Copy(self, new_id : bool = True) -> SubtitleEntry:
        """ Duplicate the entry, with a new identity unless told otherwise """
        return SubtitleEntry(start=self.start, end=self.end, text=self.text, number=self.number, id=None if new_id else self.id)

    def to_dict(self) -> dict[str, Any]:
        """
        Record layout used by the external key-value store
        """
        return {
            'id': self.id,
            'sequenceNumber': self.number,
            'startTime': self.srt_start,
            'endTime': self.srt_end,
            'text': self.text
        }

    @classmethod
    def from_dict(cls, record : dict[str, Any]) -> SubtitleEntry:
        """
        Rebuild an entry from a stored record. Timestamps may be strings or milliseconds.
        """
        return cls.Construct(
            number=int(record.get('sequenceNumber') or 0),
            start=record.get('startTime', 0),
            end=record.get('endTime', 0),
            text=record.get('text') or "",
            id=record.get('id')
        )

    def __str__(self) -> str:
        return f"{self.number}\n{self.srt_start} --> {self.srt_end}\n{self.text}"

    def __repr__(self) -> str:
        return f"SubtitleEntry(number={self.number}, start={self.start}, end={self.end}, text={self.text!r})"

def NewEntryId() -> str:
    """ Generate a fresh unique identifier for an entry """
    return str(uuid.uuid4())
