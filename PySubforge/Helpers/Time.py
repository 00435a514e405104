"""
Timestamp conversion and arithmetic.

Timestamps are held internally as a non-negative integer count of milliseconds.
External representations depend on the dialect:

    SRT     HH:MM:SS,mmm
    VTT     HH:MM:SS.mmm
    ASS     H:MM:SS.cc   (centiseconds, truncated, hours not padded)
"""
from datetime import timedelta
from enum import Enum

import pysubs2.time
import regex
import srt # type: ignore

from PySubforge.SubtitleError import MalformedTimestampError

class TimestampDialect(Enum):
    SRT = ','
    VTT = '.'

    @property
    def separator(self) -> str:
        return self.value

_TIMESTAMP_PATTERNS = {
    TimestampDialect.SRT: regex.compile(r'^([0-9]{2,}):([0-9]{2}):([0-9]{2}),([0-9]{3})$'),
    TimestampDialect.VTT: regex.compile(r'^([0-9]{2,}):([0-9]{2}):([0-9]{2})\.([0-9]{3})$'),
}

def ParseTimestamp(text : str, dialect : TimestampDialect = TimestampDialect.SRT) -> int:
    """
    Parse a strict HH:MM:SS<sep>mmm timestamp into milliseconds.

    Hours may have more than two digits, minutes and seconds must be exactly two digits in the range 0-59
    and milliseconds exactly three digits.

    Raises:
        MalformedTimestampError: if the text does not match the dialect's pattern
    """
    if not isinstance(text, str):
        raise MalformedTimestampError(repr(text))

    match = _TIMESTAMP_PATTERNS[dialect].match(text.strip())
    if not match:
        raise MalformedTimestampError(text)

    hours, minutes, seconds, milliseconds = (int(group) for group in match.groups())
    if minutes > 59 or seconds > 59:
        raise MalformedTimestampError(text, f"Minutes and seconds must be in the range 0-59: {text!r}")

    return ((hours * 60 + minutes) * 60 + seconds) * 1000 + milliseconds

def FormatTimestamp(ms : int, dialect : TimestampDialect = TimestampDialect.SRT) -> str:
    """
    Format milliseconds as HH:MM:SS<sep>mmm. Hours are padded to two digits but never clamped.
    """
    ms = max(0, int(ms))
    timestamp : str = srt.timedelta_to_srt_timestamp(timedelta(milliseconds=ms))
    if dialect is TimestampDialect.SRT:
        return timestamp
    return timestamp.replace(TimestampDialect.SRT.separator, dialect.separator)

def FormatCentisecondTimestamp(ms : int) -> str:
    """
    Format milliseconds as an ASS timestamp, H:MM:SS.cc

    The millisecond remainder is truncated to centiseconds, not rounded.
    """
    times = pysubs2.time.ms_to_times(max(0, int(ms)))
    return f"{times.h}:{times.m:02d}:{times.s:02d}.{times.ms // 10:02d}"

def ShiftTimestamp(ms : int, delta_ms : int) -> int:
    """
    Shift a timestamp by a (possibly negative) delta, clamping at zero
    """
    return max(0, ms + delta_ms)

def GetDuration(start : int, end : int) -> int:
    """
    Duration between two timestamps. May be negative, it is up to the caller to treat that as invalid.
    """
    return end - start

def SecondsToMilliseconds(seconds : float|int) -> int:
    """
    Convert a (possibly fractional) number of seconds to whole milliseconds
    """
    return int(round(seconds * 1000))

def NormaliseTimestamp(text : str) -> str:
    """
    Convert an SRT or WebVTT style timestamp to the SRT (comma separated) form
    """
    return text.strip().replace(TimestampDialect.VTT.separator, TimestampDialect.SRT.separator)

def GetTimestamp(value : int|float|str, dialect : TimestampDialect|None = None) -> int:
    """
    Interpret a value as a timestamp in milliseconds.

    Integers are treated as milliseconds, floats as seconds. Strings are parsed strictly,
    in either dialect if none is specified.
    """
    if isinstance(value, bool):
        raise MalformedTimestampError(repr(value))

    if isinstance(value, int):
        if value < 0:
            raise MalformedTimestampError(repr(value), f"Timestamps cannot be negative: {value}")
        return value

    if isinstance(value, float):
        if value < 0:
            raise MalformedTimestampError(repr(value), f"Timestamps cannot be negative: {value}")
        return SecondsToMilliseconds(value)

    if not isinstance(value, str):
        raise MalformedTimestampError(repr(value))

    if dialect is None:
        return ParseTimestamp(NormaliseTimestamp(value), TimestampDialect.SRT)

    return ParseTimestamp(value, dialect)
