import importlib
import inspect
import logging
import os
import pkgutil
from enum import Enum
from pathlib import Path

from pysubs2.exceptions import Pysubs2Error
import pysubs2.formats

from PySubforge.Helpers.Parse import HasWebVttSignature
from PySubforge.SettingsType import SettingsType
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import SubtitleParseError, UnsupportedFormatError
from PySubforge.SubtitleFileHandler import (
    SubtitleFileHandler,
    default_encoding,
    fallback_encoding,
)


class SubtitleFormat(str, Enum):
    """
    Export formats supported by the engine
    """
    SRT = 'srt'
    VTT = 'vtt'
    TXT = 'txt'
    ASS = 'ass'

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @classmethod
    def from_tag(cls, tag : 'str|SubtitleFormat|None') -> 'SubtitleFormat|None':
        """
        Resolve a format tag ('srt', '.srt', 'SRT') to a SubtitleFormat, or None if it is not recognised
        """
        if isinstance(tag, SubtitleFormat):
            return tag
        if not tag or not isinstance(tag, str):
            return None
        value = tag.strip().lower().lstrip('.')
        return next((item for item in cls if item.value == value), None)


_detectable_formats : dict[str, str] = {
    'ass': '.ass',
    'ssa': '.ssa',
    'srt': '.srt',
    'vtt': '.vtt',
}

class SubtitleFormatRegistry:
    """
    Manages discovery and lookup of subtitle file handlers.

    Uses lazy discovery to find all subclasses of SubtitleFileHandler in the Formats package.
    Handlers are registered by their supported file extensions and priorities.

    Provides methods to create handler instances based on file extensions, filenames or format tags.
    """
    _handlers : dict[str, type[SubtitleFileHandler]] = {}
    _priorities : dict[str, int] = {}
    _discovered : bool = False

    @classmethod
    def register_handler(cls, handler_class : type[SubtitleFileHandler]) -> None:
        """
        Register a subtitle file handler class for its supported extensions.
        """
        priorities = handler_class.SUPPORTED_EXTENSIONS
        for ext, priority in priorities.items():
            ext = ext.lower()
            if ext not in cls._handlers or priority >= cls._priorities[ext]:
                cls._handlers[ext] = handler_class
                cls._priorities[ext] = priority

    @classmethod
    def get_handler_by_extension(cls, extension : str) -> type[SubtitleFileHandler]:
        """
        Get the subtitle file handler class for the given extension.
        """
        cls._ensure_discovered()
        ext = extension.lower()
        if not ext.startswith('.'):
            ext = f".{ext}"
        if ext not in cls._handlers:
            raise ValueError(f"Unknown subtitle format: {extension}. Available formats: {cls.list_available_formats()}")
        return cls._handlers[ext]

    @classmethod
    def create_handler(cls, extension: str|None = None, filename: str|None = None, settings: SettingsType|None = None) -> SubtitleFileHandler:
        """
        Instantiate a subtitle file handler for the given extension, configured with the document settings.
        """
        if extension is None and filename is not None:
            extension = cls.get_format_from_filename(filename)

        if extension is None or not extension:
            raise ValueError(f"Format cannot be deduced from filename or extension '{filename or extension or 'None'}'. Available formats: {cls.list_available_formats()}")

        handler_cls = cls.get_handler_by_extension(extension)
        return handler_cls(settings)

    @classmethod
    def create_export_handler(cls, format_tag : 'str|SubtitleFormat|None', strict : bool = False) -> SubtitleFileHandler:
        """
        Instantiate the handler used to export in the requested format.

        Unrecognised formats fall back to SRT, unless strict is set in which case UnsupportedFormatError is raised.
        """
        subtitle_format = SubtitleFormat.from_tag(format_tag)
        if subtitle_format is None:
            if strict:
                raise UnsupportedFormatError(str(format_tag), cls.list_available_formats())

            logging.warning(f"Unsupported subtitle format '{format_tag}', exporting as SRT")
            subtitle_format = SubtitleFormat.SRT

        return cls.create_handler(subtitle_format.extension)

    @classmethod
    def enumerate_formats(cls) -> list[str]:
        """
        List all supported subtitle formats (file extensions).
        """
        cls._ensure_discovered()
        return sorted(cls._handlers.keys())

    @classmethod
    def list_available_formats(cls) -> str:
        """
        Get a comma-separated string of all supported subtitle formats.
        """
        formats = cls.enumerate_formats()
        return "None" if not formats else ", ".join(formats)

    @classmethod
    def get_mime_type(cls, format_tag : 'str|SubtitleFormat|None') -> str:
        """
        MIME type for an export format, text/plain if the format is not known
        """
        subtitle_format = SubtitleFormat.from_tag(format_tag)
        if subtitle_format is None:
            return 'text/plain'

        cls._ensure_discovered()
        handler_cls = cls._handlers.get(subtitle_format.extension)
        return handler_cls.MIME_TYPE if handler_cls else 'text/plain'

    @classmethod
    def disable_autodiscovery(cls) -> None:
        """ Disable automatic discovery of subtitle formats (for testing) """
        cls.clear()
        cls._discovered = True

    @classmethod
    def enable_autodiscovery(cls) -> None:
        """ Enable automatic discovery of subtitle formats (for testing) """
        cls._discovered = False

    @classmethod
    def discover(cls) -> None:
        """
        Discover and register all subtitle file handlers in the Formats package.
        """
        package_path = Path(__file__).parent / "Formats"
        for _, module_name, _ in pkgutil.iter_modules([str(package_path)]):
            module = importlib.import_module(f"PySubforge.Formats.{module_name}")
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, SubtitleFileHandler) and obj is not SubtitleFileHandler:
                    cls.register_handler(obj)
        cls._discovered = True

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered handlers
        """
        cls._handlers.clear()
        cls._priorities.clear()
        cls._discovered = False

    @classmethod
    def get_format_from_filename(cls, filename : str) -> str|None:
        """
        Deduce subtitle format from file extension
        """
        _, extension = os.path.splitext(filename)
        return extension.lower() if extension else None

    @classmethod
    def detect_format(cls, content : str) -> str:
        """
        Detect the format of subtitle content, defaulting to SRT.

        A WEBVTT signature means WebVTT. Otherwise pysubs2 is asked to identify the content,
        and only formats with a registered handler are accepted.
        """
        cls._ensure_discovered()
        if HasWebVttSignature(content):
            return '.vtt'

        try:
            detected = pysubs2.formats.autodetect_format(content)

        except Pysubs2Error as e:
            logging.debug(f"Unable to detect subtitle format: {e}")
            return '.srt'

        # pysubs2 recognises more formats than we have handlers for, some with no file extension
        extension = _detectable_formats.get(detected)
        if extension is None or extension not in cls._handlers:
            logging.debug(f"Detected format '{detected}' is not supported, treating content as SRT")
            return '.srt'

        logging.info(f"Detected subtitle format '{extension}'")
        return extension

    @classmethod
    def detect_format_and_parse_string(cls, content : str, settings : SettingsType|None = None) -> SubtitleData:
        """
        Detect subtitle format from the content and parse it accordingly.
        """
        extension = cls.detect_format(content)
        handler = cls.create_handler(extension, settings=settings)
        data = handler.parse_string(content)
        data.metadata['detected_format'] = extension
        return data

    @classmethod
    def detect_format_and_load_file(cls, path : str, settings : SettingsType|None = None) -> SubtitleData:
        """
        Detect subtitle format using content and load file accordingly.
        """
        try:
            try:
                with open(path, 'r', encoding=default_encoding, newline='') as f:
                    content = f.read()
            except UnicodeDecodeError:
                with open(path, 'r', encoding=fallback_encoding, newline='') as f:
                    content = f.read()

        except OSError as e:
            raise SubtitleParseError(f"Failed to read subtitle file: {e}", e)

        return cls.detect_format_and_parse_string(content, settings)

    @classmethod
    def _ensure_discovered(cls) -> None:
        if not cls._discovered:
            cls.discover()


def convert_entries(entries : list[SubtitleEntry], format_tag : 'str|SubtitleFormat|None' = SubtitleFormat.SRT, strict : bool = False) -> str:
    """
    Serialize entries in the requested format. Unknown formats are exported as SRT unless strict is set.
    """
    handler = SubtitleFormatRegistry.create_export_handler(format_tag, strict=strict)
    return handler.compose(SubtitleData(entries=list(entries)))
