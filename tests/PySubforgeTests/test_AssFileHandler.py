import unittest

from PySubforge.Formats.AssFileHandler import AssFileHandler
from PySubforge.Helpers.TestCases import SubtitleTestCase
from PySubforge.Helpers.Tests import log_input_expected_error, skip_if_debugger_attached
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleError import SubtitleParseError


class TestAssFileHandler(SubtitleTestCase):
    ass_content = (
        "[Script Info]\n"
        "Title: Sample Script\n"
        "ScriptType: v4.00+\n"
        "\n"
        "[V4+ Styles]\n"
        "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding\n"
        "Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1\n"
        "\n"
        "[Events]\n"
        "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
        "Dialogue: 0,0:00:01.00,0:00:03.50,Default,,0,0,0,,{\\i1}Hello{\\i0} there\n"
        "Comment: 0,0:00:02.00,0:00:04.00,Default,,0,0,0,,Translator note\n"
        "Dialogue: 0,0:00:04.00,0:00:06.00,Default,,0,0,0,,First line\\NSecond line\n"
    )

    def setUp(self) -> None:
        super().setUp()
        self.handler = AssFileHandler()

    def test_ComposeExactOutput(self):
        entries = self.create_entries([
            (1234, 4567, "Line1\nLine2"),
            (5000, 6000, "Single"),
        ])
        composed = self.handler.compose(SubtitleData(entries=entries))

        expected_events = (
            "Dialogue: 0,0:00:01.23,0:00:04.56,Default,,0,0,0,,Line1\\NLine2\n"
            "Dialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,Single"
        )
        self.assertLoggedEqual("composed ASS", AssFileHandler.HEADER + expected_events, composed)

    def test_ComposeHeader(self):
        composed = self.handler.compose(SubtitleData())

        self.assertLoggedEqual("empty document", AssFileHandler.HEADER, composed)
        self.assertLoggedTrue("script info first", composed.startswith("[Script Info]\nTitle: SubtitleForge Export\n"))
        self.assertLoggedIn("resolution", "PlayResX: 1920\nPlayResY: 1080\n", composed)
        self.assertLoggedIn("default style", "Style: Default,Arial,48,&H00FFFFFF,&H000000FF,&H00000000,&H64000000,-1,0,0,0,100,100,0,0,1,2,1,2,10,10,40,1\n", composed)
        self.assertLoggedTrue("events format last", composed.endswith("Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"))

    def test_ComposeTruncatesToCentiseconds(self):
        entries = self.create_entries([(1999, 2009, "Truncated")])
        composed = self.handler.compose(SubtitleData(entries=entries))
        self.assertLoggedIn("truncated times", "Dialogue: 0,0:00:01.99,0:00:02.00,", composed)

    def test_ParseString(self):
        data = self.handler.parse_string(self.ass_content)

        self.assertLoggedEqual("detected format", '.ass', data.detected_format)
        self.assertLoggedEqual("entry count", 2, len(data.entries))
        self.assertLoggedEqual("first start", 1000, data.entries[0].start)
        self.assertLoggedEqual("first end", 3500, data.entries[0].end)
        self.assertLoggedEqual("override tags removed", "Hello there", data.entries[0].text)
        self.assertLoggedEqual("line breaks", "First line\nSecond line", data.entries[1].text)
        self.assertLoggedSequenceEqual("numbers", [1, 2], [entry.number for entry in data.entries])
        self.assertLoggedEqual("title", "Sample Script", data.metadata.get('title'))

    def test_ReadComposedOutput(self):
        entries = self.create_entries([
            (1230, 4560, "Line1\nLine2"),
            (5000, 6000, "Single"),
        ])
        composed = self.handler.compose(SubtitleData(entries=entries))
        data = self.handler.parse_string(composed)

        self.assertSameContent(entries, data.entries)

    @skip_if_debugger_attached
    def test_ParseInvalidContent(self):
        content = "This is not an ASS script"
        with self.assertRaises(SubtitleParseError) as e:
            self.handler.parse_string(content)
        log_input_expected_error(content, SubtitleParseError, e.exception)

    def test_Extensions(self):
        self.assertLoggedSequenceEqual("extensions", ['.ass', '.ssa'], self.handler.get_file_extensions())
        self.assertLoggedEqual("ass priority", 10, self.handler.get_extension_priorities()['.ass'])
        self.assertLoggedEqual("MIME type", 'text/x-ssa', self.handler.get_mime_type())


if __name__ == '__main__':
    unittest.main()
