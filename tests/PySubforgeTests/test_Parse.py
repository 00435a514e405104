import unittest

from PySubforge.Helpers.Parse import HasWebVttSignature, ParseSubtitleBlocks, StripWebVttHeader
from PySubforge.Helpers.TestCases import LoggedTestCase
from PySubforge.SubtitleError import MalformedTimestampError, SubtitleParseError


class TestParseSubtitleBlocks(LoggedTestCase):
    srt_content = (
        "1\n"
        "00:00:01,000 --> 00:00:04,000\n"
        "Hello there\n"
        "\n"
        "2\n"
        "00:00:05,000 --> 00:00:08,500\n"
        "First line\n"
        "Second line\n"
    )

    def test_ParseBasicSrt(self):
        entries, diagnostics = ParseSubtitleBlocks(self.srt_content)

        self.assertLoggedEqual("entry count", 2, len(entries))
        self.assertLoggedEqual("diagnostics", 0, len(diagnostics))
        self.assertLoggedEqual("first start", 1000, entries[0].start)
        self.assertLoggedEqual("first end", 4000, entries[0].end)
        self.assertLoggedEqual("first text", "Hello there", entries[0].text)
        self.assertLoggedEqual("second end", 8500, entries[1].end)
        self.assertLoggedEqual("multi-line text", "First line\nSecond line", entries[1].text)
        self.assertLoggedSequenceEqual("sequence numbers", [1, 2], [entry.number for entry in entries])

    def test_EmptyInput(self):
        for content in ["", "   ", "\n\n\n"]:
            with self.subTest(content=content):
                entries, diagnostics = ParseSubtitleBlocks(content)
                self.assertLoggedEqual("entry count", 0, len(entries), input_value=content)
                self.assertLoggedEqual("diagnostic count", 0, len(diagnostics), input_value=content)

    def test_UniqueIdentifiers(self):
        entries, _ = ParseSubtitleBlocks(self.srt_content)
        ids = [entry.id for entry in entries]
        self.assertLoggedTrue("ids assigned", all(ids))
        self.assertLoggedEqual("ids unique", len(ids), len(set(ids)))

        reparsed, _ = ParseSubtitleBlocks(self.srt_content)
        self.assertLoggedTrue("fresh ids on each parse", set(ids).isdisjoint(entry.id for entry in reparsed))

    def test_DotSeparatorInSrt(self):
        content = "1\n00:00:01.000 --> 00:00:04.000\nDotted timing\n"
        entries, diagnostics = ParseSubtitleBlocks(content)

        self.assertLoggedEqual("entry count", 1, len(entries))
        self.assertLoggedEqual("diagnostics", 0, len(diagnostics))
        self.assertLoggedEqual("start", 1000, entries[0].start)
        self.assertLoggedEqual("normalised start", "00:00:01,000", entries[0].srt_start)
        self.assertLoggedEqual("normalised end", "00:00:04,000", entries[0].srt_end)

    def test_MalformedBlockSkipped(self):
        content = (
            "1\n00:00:01,000 --> 00:00:04,000\nKeep me\n\n"
            "2\ngarbage\nDrop me\n"
        )
        entries, diagnostics = ParseSubtitleBlocks(content)

        self.assertLoggedEqual("entry count", 1, len(entries))
        self.assertLoggedEqual("kept text", "Keep me", entries[0].text)
        self.assertLoggedEqual("diagnostic count", 1, len(diagnostics))
        self.assertLoggedIsInstance("diagnostic type", diagnostics[0], SubtitleParseError)
        self.assertLoggedEqual("diagnostic block", 2, diagnostics[0].block_number)
        self.assertLoggedIn("diagnostic block text", "Drop me", diagnostics[0].block_text)

    def test_NonAsciiDigitsSkipped(self):
        content = (
            "1\n\u0660\u0660:\u0660\u0660:\u0660\u0661,\u0660\u0660\u0660 --> 00:00:02,000\nArabic-Indic digits\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\nKeep me\n"
        )
        entries, diagnostics = ParseSubtitleBlocks(content)

        self.assertLoggedEqual("entry count", 1, len(entries))
        self.assertLoggedEqual("kept text", "Keep me", entries[0].text)
        self.assertLoggedEqual("diagnostic block", 1, diagnostics[0].block_number)

    def test_OutOfRangeTimestampSkipped(self):
        content = (
            "1\n00:00:61,000 --> 00:01:04,000\nBad seconds\n\n"
            "2\n00:00:05,000 --> 00:00:06,000\nGood\n"
        )
        entries, diagnostics = ParseSubtitleBlocks(content)

        self.assertLoggedEqual("entry count", 1, len(entries))
        self.assertLoggedEqual("kept text", "Good", entries[0].text)
        self.assertLoggedIsInstance("diagnostic type", diagnostics[0], MalformedTimestampError)

    def test_ShortBlocksDiscarded(self):
        content = (
            "1\n\n"
            "2\n00:00:05,000 --> 00:00:06,000\nText\n\n"
            "orphan text\n"
        )
        entries, diagnostics = ParseSubtitleBlocks(content)

        self.assertLoggedEqual("entry count", 1, len(entries))
        self.assertLoggedEqual("diagnostic count", 2, len(diagnostics))

    def test_MissingSequenceNumber(self):
        content = (
            "00:00:01,000 --> 00:00:02,000\nNo number\n\n"
            "7\n00:00:03,000 --> 00:00:04,000\nExplicit number\n\n"
            "00:00:05,000 --> 00:00:06,000\nNo number again\n"
        )
        entries, _ = ParseSubtitleBlocks(content)

        self.assertLoggedSequenceEqual("sequence numbers", [1, 7, 3], [entry.number for entry in entries])
        self.assertLoggedEqual("text of unnumbered block", "No number", entries[0].text)

    def test_InputOrderPreserved(self):
        content = (
            "1\n00:00:10,000 --> 00:00:11,000\nLater\n\n"
            "2\n00:00:01,000 --> 00:00:02,000\nEarlier\n"
        )
        entries, _ = ParseSubtitleBlocks(content)
        self.assertLoggedSequenceEqual("text order", ["Later", "Earlier"], [entry.text for entry in entries])

    def test_WindowsLineEndingsAndBlankLineRuns(self):
        content = "1\r\n00:00:01,000 --> 00:00:02,000\r\nOne\r\n\r\n\r\n  \r\n2\r\n00:00:03,000 --> 00:00:04,000\r\nTwo\r\n"
        entries, diagnostics = ParseSubtitleBlocks(content)

        self.assertLoggedEqual("entry count", 2, len(entries))
        self.assertLoggedEqual("diagnostics", 0, len(diagnostics))
        self.assertLoggedSequenceEqual("texts", ["One", "Two"], [entry.text for entry in entries])

    def test_WebVttContent(self):
        content = (
            "WEBVTT\n"
            "Kind: captions\n"
            "Language: en\n"
            "\n"
            "00:00:01.000 --> 00:00:02.000 align:start\n"
            "Cue one\n"
            "\n"
            "intro\n"
            "00:00:03.000 --> 00:00:04.000\n"
            "Cue two\n"
        )
        entries, diagnostics = ParseSubtitleBlocks(content)

        self.assertLoggedEqual("entry count", 1, len(entries))
        self.assertLoggedEqual("first cue text", "Cue one", entries[0].text)
        self.assertLoggedEqual("named cue skipped", 1, len(diagnostics))


class TestWebVttHeader(LoggedTestCase):
    def test_HasWebVttSignature(self):
        cases = [
            ("WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nText", True),
            ("\ufeffWEBVTT - Some title\n", True),
            ("WEBVTTX\n", False),
            ("1\n00:00:01,000 --> 00:00:02,000\nText", False),
            ("", False),
        ]
        for content, expected in cases:
            with self.subTest(content=content):
                self.assertLoggedEqual("signature", expected, HasWebVttSignature(content), input_value=content)

    def test_StripWebVttHeader(self):
        content = "WEBVTT\nKind: captions\n\n1\n00:00:01.000 --> 00:00:02.000\nText"
        body, header = StripWebVttHeader(content)

        self.assertLoggedSequenceEqual("header", ["WEBVTT", "Kind: captions"], header)
        self.assertLoggedEqual("body", "\n1\n00:00:01.000 --> 00:00:02.000\nText", body)

    def test_StripWithoutSignature(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\nText"
        body, header = StripWebVttHeader(content)

        self.assertLoggedEqual("body unchanged", content, body)
        self.assertLoggedSequenceEqual("no header", [], header)


if __name__ == '__main__':
    unittest.main()
