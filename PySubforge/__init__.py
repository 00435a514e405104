"""
PySubforge - Subtitle Interchange Library

Parse SRT, WebVTT, ASS and plain text subtitles into a common representation,
edit and validate them, and export them to any of the supported formats.

Basic Usage
-----------

# Load subtitles from a file (or a string), detecting the format
subs = init_subtitles(filepath="movie.srt")

# Shift everything half a second later and check for problems
with SubtitleEditor(subs) as editor:
    editor.ShiftTimesBySeconds(0.5)

warnings = SubtitleValidator(subs.settings).ValidateEntries(subs.entries)

# Export as WebVTT
vtt = subs.ExportSubtitles("vtt")
"""
from __future__ import annotations

from collections.abc import Mapping

from PySubforge.Options import Options
from PySubforge.SettingsType import SettingType, SettingsType
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleEditor import SubtitleEditor
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import (
    InvalidDurationError,
    InvalidOrderingError,
    LineTooLongError,
    MalformedTimestampError,
    OverlappingEntryError,
    SubtitleError,
    SubtitleParseError,
    UnsupportedFormatError,
)
from PySubforge.SubtitleFormatRegistry import SubtitleFormat, SubtitleFormatRegistry, convert_entries
from PySubforge.SubtitleTemplates import GetTemplate, SubtitleTemplate, subtitle_templates
from PySubforge.SubtitleValidator import SubtitleValidator
from PySubforge.Subtitles import Subtitles
from PySubforge.VideoProcessingOptions import VideoProcessingOptions
from PySubforge.version import __version__


def init_options(**settings: SettingType) -> Options:
    """
    Create and return an :class:`Options` instance.

    Parameters
    ----------
    **settings : SettingType
        e.g. max_characters = 42, default_duration = 2.5, export_format = "vtt", strict_format = True

        Options that are not specified will be assigned default values.

    Examples
    --------

    opts = init_options(export_format="ass", max_characters=42)
    """
    return Options(SettingsType(settings))

def init_subtitles(
    filepath: str|None = None,
    content: str|None = None,
    *,
    options: Options|SettingsType|Mapping[str, SettingType]|None = None,
    template: str|None = None,
) -> Subtitles:
    """
    Initialise a :class:`Subtitles` instance and optionally load content from a file or string.

    Parameters
    ----------
    filepath : str|None
        Path to the subtitle file to load.

    content : str|None
        Subtitle content as a string. The format is detected from the content.

    options : Options or SettingsType, optional
        Settings for editing and exporting, e.g. `max_characters`, `default_duration`, `export_format`.

    template : str|None
        Id of a built-in template to start from, when no file or content is given.

    Returns
    -------
    Subtitles : An initialised subtitles instance. Content with no valid blocks gives an empty document.

    Examples
    --------

    # Load subtitles from a string:
    srt_content = "1\\n00:00:01,000 --> 00:00:03,000\\nHello world"
    subs = init_subtitles(content=srt_content)
    """
    if filepath and content:
        raise SubtitleError("Only one of 'filepath' or 'content' should be provided, not both.")

    settings = Options(options) if options else Options()
    subtitles = Subtitles(filepath, settings=settings)

    if filepath:
        subtitles.LoadSubtitles()
    elif content:
        subtitles.LoadSubtitlesFromString(content)
    elif template:
        subtitle_template = GetTemplate(template)
        if not subtitle_template:
            raise SubtitleError(f"Unknown template: {template}")

        with SubtitleEditor(subtitles) as editor:
            editor.ApplyTemplate(subtitle_template)

    return subtitles

def parse_subtitles(content: str, format_tag: str|SubtitleFormat|None = None, options: SettingsType|None = None) -> SubtitleData:
    """
    Parse subtitle content into entries, plus diagnostics for anything that was skipped.

    The format is detected from the content unless one is given.
    Plain text is laid out using the default duration and entry gap from the options.
    """
    if format_tag is None:
        return SubtitleFormatRegistry.detect_format_and_parse_string(content, options)

    subtitle_format = SubtitleFormat.from_tag(format_tag)
    if subtitle_format is None:
        raise UnsupportedFormatError(str(format_tag), SubtitleFormatRegistry.list_available_formats())

    handler = SubtitleFormatRegistry.create_handler(subtitle_format.extension, settings=options)
    return handler.parse_string(content)


__all__ = [
    '__version__',
    'init_options',
    'init_subtitles',
    'parse_subtitles',
    'convert_entries',
    'InvalidDurationError',
    'InvalidOrderingError',
    'LineTooLongError',
    'MalformedTimestampError',
    'Options',
    'OverlappingEntryError',
    'SettingsType',
    'SubtitleData',
    'SubtitleEditor',
    'SubtitleEntry',
    'SubtitleError',
    'SubtitleFormat',
    'SubtitleFormatRegistry',
    'SubtitleParseError',
    'SubtitleTemplate',
    'SubtitleValidator',
    'Subtitles',
    'UnsupportedFormatError',
    'VideoProcessingOptions',
    'subtitle_templates',
]
