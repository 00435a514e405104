from abc import ABC, abstractmethod
from typing import TextIO
import os

from PySubforge.SettingsType import SettingsType
from PySubforge.SubtitleData import SubtitleData

# Default encodings for reading subtitle files
default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')
fallback_encoding = os.getenv('FALLBACK_ENCODING', 'iso-8859-1')


class SubtitleFileHandler(ABC):
    """
    Abstract interface for reading and writing subtitle files.

    Implementations handle format-specific operations while business logic remains format-agnostic.
    Composing never modifies the entries, and always numbers them by position.
    """

    SUPPORTED_EXTENSIONS: dict[str, int] = {}
    MIME_TYPE: str = 'text/plain'

    def __init__(self, settings: SettingsType|None = None):
        self.settings = SettingsType(settings)

    @abstractmethod
    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse subtitle string content and return entries with file-level metadata.

        Returns:
            SubtitleData: Parsed subtitle entries, metadata and diagnostics for skipped content

        Raises:
            SubtitleParseError: If the content cannot be parsed at all
        """
        raise NotImplementedError

    @abstractmethod
    def compose(self, data: SubtitleData) -> str:
        """
        Compose subtitle entries into text for saving or exporting.

        Args:
            data: SubtitleData containing subtitle entries and metadata

        Returns:
            str: Subtitle content in the file handler's format
        """
        raise NotImplementedError

    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        """
        Parse the contents of an open file.
        """
        return self.parse_string(file_obj.read())

    def load_file(self, path: str) -> SubtitleData:
        """
        Open a subtitle file and parse it, retrying with the fallback encoding if necessary.

        Raises:
            SubtitleParseError: If parsing fails
            UnicodeDecodeError: If file is in an unsupported encoding
        """
        try:
            with open(path, 'r', encoding=default_encoding, newline='') as f:
                return self.parse_file(f)
        except UnicodeDecodeError:
            with open(path, 'r', encoding=fallback_encoding, newline='') as f:
                return self.parse_file(f)

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        """
        Get priority for each supported extension.

        Returns:
            dict: Mapping of file extensions to their priority (higher = more preferred)
        """
        return self.__class__.SUPPORTED_EXTENSIONS.copy()

    def get_mime_type(self) -> str:
        return self.__class__.MIME_TYPE
