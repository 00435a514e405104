import unittest

from PySubforge.Helpers.TestCases import LoggedTestCase
from PySubforge.Helpers.Tests import log_input_expected_error, skip_if_debugger_attached
from PySubforge.Helpers.Time import (
    FormatCentisecondTimestamp,
    FormatTimestamp,
    GetDuration,
    GetTimestamp,
    ParseTimestamp,
    SecondsToMilliseconds,
    ShiftTimestamp,
    TimestampDialect,
)
from PySubforge.SubtitleError import MalformedTimestampError


class TestParseTimestamp(LoggedTestCase):
    srt_cases = [
        ("00:00:00,000", 0),
        ("00:00:01,000", 1000),
        ("00:00:01,234", 1234),
        ("00:01:00,000", 60000),
        ("01:00:00,000", 3600000),
        ("12:34:56,789", 45296789),
        ("99:59:59,999", 359999999),
        ("100:00:00,000", 360000000),
    ]

    def test_ParseSrtTimestamp(self):
        for text, expected in self.srt_cases:
            with self.subTest(text=text):
                result = ParseTimestamp(text, TimestampDialect.SRT)
                self.assertLoggedEqual("milliseconds", expected, result, input_value=text)

    def test_ParseVttTimestamp(self):
        for text, expected in self.srt_cases:
            vtt_text = text.replace(',', '.')
            with self.subTest(text=vtt_text):
                result = ParseTimestamp(vtt_text, TimestampDialect.VTT)
                self.assertLoggedEqual("milliseconds", expected, result, input_value=vtt_text)

    malformed_cases = [
        ("", TimestampDialect.SRT),
        ("garbage", TimestampDialect.SRT),
        ("0:00:01,000", TimestampDialect.SRT),
        ("00:0:01,000", TimestampDialect.SRT),
        ("00:00:1,000", TimestampDialect.SRT),
        ("00:00:01,00", TimestampDialect.SRT),
        ("00:00:01,0000", TimestampDialect.SRT),
        ("00:00:01.000", TimestampDialect.SRT),
        ("00:00:01,000", TimestampDialect.VTT),
        ("00:60:00,000", TimestampDialect.SRT),
        ("00:00:60,000", TimestampDialect.SRT),
        ("\u0660\u0660:\u0660\u0660:\u0660\u0661,\u0660\u0660\u0660", TimestampDialect.SRT),
        ("\uff10\uff10:\uff10\uff10:\uff10\uff11.\uff10\uff10\uff10", TimestampDialect.VTT),
    ]

    @skip_if_debugger_attached
    def test_MalformedTimestamp(self):
        for text, dialect in self.malformed_cases:
            with self.subTest(text=text, dialect=dialect):
                with self.assertRaises(MalformedTimestampError) as e:
                    ParseTimestamp(text, dialect)
                log_input_expected_error(text, MalformedTimestampError, e.exception)


class TestFormatTimestamp(LoggedTestCase):
    def test_FormatTimestamp(self):
        cases = [
            (0, TimestampDialect.SRT, "00:00:00,000"),
            (1234, TimestampDialect.SRT, "00:00:01,234"),
            (45296789, TimestampDialect.SRT, "12:34:56,789"),
            (45296789, TimestampDialect.VTT, "12:34:56.789"),
            (360000000, TimestampDialect.SRT, "100:00:00,000"),
        ]
        for ms, dialect, expected in cases:
            with self.subTest(ms=ms, dialect=dialect):
                result = FormatTimestamp(ms, dialect)
                self.assertLoggedEqual("formatted timestamp", expected, result, input_value=ms)

    def test_TimestampInverse(self):
        samples = [0, 1, 999, 1000, 59999, 60000, 3599999, 3600000, 45296789, 123456789, 359999999]
        for dialect in TimestampDialect:
            for ms in samples:
                with self.subTest(ms=ms, dialect=dialect):
                    result = ParseTimestamp(FormatTimestamp(ms, dialect), dialect)
                    self.assertLoggedEqual("round trip", ms, result, input_value=ms)

    def test_CentisecondTimestamp(self):
        cases = [
            (0, "0:00:00.00"),
            (1234, "0:00:01.23"),
            (1239, "0:00:01.23"),
            (1500, "0:00:01.50"),
            (45296789, "12:34:56.78"),
            (360000000, "100:00:00.00"),
        ]
        for ms, expected in cases:
            with self.subTest(ms=ms):
                result = FormatCentisecondTimestamp(ms)
                self.assertLoggedEqual("ASS timestamp", expected, result, input_value=ms)


class TestTimeArithmetic(LoggedTestCase):
    def test_ShiftTimestamp(self):
        cases = [
            (1000, 500, 1500),
            (1000, -500, 500),
            (500, -1000, 0),
            (0, -1, 0),
            (0, 0, 0),
        ]
        for ms, delta, expected in cases:
            with self.subTest(ms=ms, delta=delta):
                result = ShiftTimestamp(ms, delta)
                self.assertLoggedEqual("shifted", expected, result, input_value=(ms, delta))

    def test_GetDuration(self):
        self.assertLoggedEqual("positive duration", 3000, GetDuration(1000, 4000))
        self.assertLoggedEqual("negative duration", -1000, GetDuration(4000, 3000))
        self.assertLoggedEqual("zero duration", 0, GetDuration(2000, 2000))

    def test_SecondsToMilliseconds(self):
        cases = [(1, 1000), (1.5, 1500), (-0.25, -250), (2.0004, 2000), (0.0016, 2)]
        for seconds, expected in cases:
            with self.subTest(seconds=seconds):
                self.assertLoggedEqual("milliseconds", expected, SecondsToMilliseconds(seconds), input_value=seconds)

    def test_GetTimestamp(self):
        self.assertLoggedEqual("int is milliseconds", 1500, GetTimestamp(1500))
        self.assertLoggedEqual("float is seconds", 1500, GetTimestamp(1.5))
        self.assertLoggedEqual("srt string", 1500, GetTimestamp("00:00:01,500"))
        self.assertLoggedEqual("vtt string", 1500, GetTimestamp("00:00:01.500"))

    @skip_if_debugger_attached
    def test_GetTimestampInvalid(self):
        for value in ["1.5 seconds", -1, -1.0, None]:
            with self.subTest(value=value):
                with self.assertRaises(MalformedTimestampError) as e:
                    GetTimestamp(value) # type: ignore[arg-type]
                log_input_expected_error(value, MalformedTimestampError, e.exception)


if __name__ == '__main__':
    unittest.main()
