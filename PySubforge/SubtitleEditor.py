from __future__ import annotations
from collections.abc import Callable
from typing import Any

import logging

from PySubforge.Helpers.Time import GetTimestamp, SecondsToMilliseconds, ShiftTimestamp
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import SubtitleError
from PySubforge.SubtitleTemplates import SubtitleTemplate
from PySubforge.Subtitles import Subtitles


class SubtitleEditor:
    """
    Handles mutation operations on a subtitle document.
    Use as a context manager to ensure proper locking.

    Every structural change (insert, delete, move) renumbers the entries by position.
    """

    def __init__(self, subtitles: Subtitles, on_exit: Callable[[bool], None]|None = None) -> None:
        self.subtitles = subtitles
        self._lock_acquired = False
        self._on_exit: Callable[[bool], None]|None = on_exit

    def __enter__(self) -> SubtitleEditor:
        self._lock_acquired = self.subtitles.lock.acquire()
        if not self._lock_acquired:
            raise SubtitleError("Unable to acquire subtitle lock")

        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._lock_acquired:
            self.subtitles.lock.release()
            self._lock_acquired = False

        if self._on_exit:
            self._on_exit(exc_type is None)

    def Renumber(self) -> None:
        """
        Number entries by their 1-based position in the document
        """
        for number, entry in enumerate(self.subtitles.entries, start=1):
            entry.number = number

    def ShiftTimes(self, delta_ms: int) -> None:
        """
        Move every entry by the same offset. Times that would become negative are clamped to zero.
        """
        for entry in self.subtitles.entries:
            entry.start = ShiftTimestamp(entry.start, delta_ms)
            entry.end = ShiftTimestamp(entry.end, delta_ms)

        logging.debug(f"Shifted {len(self.subtitles.entries)} subtitles by {delta_ms}ms")

    def ShiftTimesBySeconds(self, delta_seconds: float) -> None:
        """
        Move every entry by an offset in (possibly fractional) seconds
        """
        self.ShiftTimes(SecondsToMilliseconds(delta_seconds))

    def AddEntry(self, text: str = "", duration: float|None = None) -> SubtitleEntry:
        """
        Append a new entry after the last one, separated by the configured gap
        """
        settings = self.subtitles.settings
        duration_ms = SecondsToMilliseconds(duration) if duration is not None else settings.default_duration_ms

        entries = self.subtitles.entries
        start = entries[-1].end + settings.entry_gap_ms if entries else 0

        entry = SubtitleEntry(start=start, end=start + duration_ms, text=text, number=len(entries) + 1)
        entries.append(entry)
        return entry

    def InsertEntry(self, index: int, entry: SubtitleEntry) -> SubtitleEntry:
        """
        Insert an entry at a position in the document
        """
        if self.subtitles.GetEntry(entry.id):
            raise SubtitleError(f"Entry {entry.id} is already in the document")

        self.subtitles.entries.insert(index, entry)
        self.Renumber()
        return entry

    def DeleteEntry(self, entry_id: str) -> SubtitleEntry:
        """
        Remove an entry from the document
        """
        index = self.subtitles.GetEntryIndex(entry_id)
        entry = self.subtitles.entries.pop(index)
        self.Renumber()
        return entry

    def MoveEntry(self, entry_id: str, new_index: int) -> None:
        """
        Move an entry to a new position. Timing is not changed.
        """
        entries = self.subtitles.entries
        if not 0 <= new_index < len(entries):
            raise ValueError(f"Position {new_index} is out of range")

        index = self.subtitles.GetEntryIndex(entry_id)
        entries.insert(new_index, entries.pop(index))
        self.Renumber()

    def UpdateEntry(self, entry_id: str, update: dict[str, Any]) -> bool:
        """
        Update fields of an entry. Times may be given as milliseconds or timestamp strings.

        Returns:
            bool: True if anything changed
        """
        entry = self.subtitles.GetEntry(entry_id)
        if not entry:
            raise ValueError(f"Entry {entry_id} does not exist")

        updated = False
        for prop in ['start', 'end']:
            if prop in update:
                time_val = GetTimestamp(update[prop])
                if time_val != getattr(entry, prop):
                    setattr(entry, prop, time_val)
                    updated = True

        if 'text' in update and update['text'] != entry.text:
            entry.text = update['text'] or ""
            updated = True

        return updated

    def ApplyTemplate(self, template: SubtitleTemplate) -> None:
        """
        Replace the entries with the template's seed entries and adopt its editing constraints
        """
        self.subtitles.entries = template.Instantiate()
        self.subtitles.settings.update({
            'template': template.id,
            'max_characters': template.max_chars_per_line,
            'default_duration': template.default_duration
        })
        logging.info(f"Applied template '{template.name}'")
