from collections.abc import Sequence
from typing import Any
import logging
import unittest

from PySubforge.Helpers.Tests import log_input_expected_result, log_test_name
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.Subtitles import Subtitles

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the name of each test and the values compared by its assertions
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def _log(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        logging.info(f"{description}")
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)

    def assertLoggedEqual(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        self._log(description, expected, actual, input_value)
        self.assertEqual(actual, expected, description)

    def assertLoggedSequenceEqual(self, description : str, expected : Sequence, actual : Sequence, input_value : Any = None) -> None:
        self._log(description, expected, actual, input_value)
        self.assertSequenceEqual(list(actual), list(expected), description)

    def assertLoggedTrue(self, description : str, actual : Any, input_value : Any = None) -> None:
        self._log(description, True, actual, input_value)
        self.assertTrue(actual, description)

    def assertLoggedFalse(self, description : str, actual : Any, input_value : Any = None) -> None:
        self._log(description, False, actual, input_value)
        self.assertFalse(actual, description)

    def assertLoggedIs(self, description : str, expected : Any, actual : Any) -> None:
        self._log(description, expected, actual)
        self.assertIs(actual, expected, description)

    def assertLoggedIsNone(self, description : str, actual : Any) -> None:
        self._log(description, None, actual)
        self.assertIsNone(actual, description)

    def assertLoggedIsNotNone(self, description : str, actual : Any) -> None:
        self._log(description, "not None", actual)
        self.assertIsNotNone(actual, description)

    def assertLoggedIsInstance(self, description : str, actual : Any, expected_type : type) -> None:
        self._log(description, expected_type.__name__, type(actual).__name__)
        self.assertIsInstance(actual, expected_type, description)

    def assertLoggedIn(self, description : str, member : Any, container : Any) -> None:
        self._log(description, member, container)
        self.assertIn(member, container, description)


class SubtitleTestCase(LoggedTestCase):
    """
    Helpers for building subtitle documents in tests
    """
    def create_entries(self, timings : list[tuple[int, int, str]]) -> list[SubtitleEntry]:
        return [ SubtitleEntry(start=start, end=end, text=text, number=number) for number, (start, end, text) in enumerate(timings, start=1) ]

    def create_subtitles(self, timings : list[tuple[int, int, str]], settings : dict|None = None) -> Subtitles:
        subtitles = Subtitles(settings=settings)
        subtitles.entries = self.create_entries(timings)
        return subtitles

    def assertSameContent(self, expected : list[SubtitleEntry], actual : list[SubtitleEntry]) -> None:
        """
        Entries match in timing and text, in the same order
        """
        self.assertLoggedEqual("entry count", len(expected), len(actual))
        for index, (expected_entry, actual_entry) in enumerate(zip(expected, actual)):
            with self.subTest(index=index):
                self.assertLoggedEqual(f"entry {index + 1} start", expected_entry.start, actual_entry.start)
                self.assertLoggedEqual(f"entry {index + 1} end", expected_entry.end, actual_entry.end)
                self.assertLoggedEqual(f"entry {index + 1} text", expected_entry.text, actual_entry.text)
