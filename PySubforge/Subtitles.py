from __future__ import annotations

import json
import logging
import os
import threading
from copy import deepcopy
from typing import Any

from PySubforge.Helpers import GetExportFilename, GetInputPath
from PySubforge.Options import Options
from PySubforge.SettingsType import SettingsType
from PySubforge.SubtitleData import SubtitleData
from PySubforge.SubtitleEntry import SubtitleEntry
from PySubforge.SubtitleError import SubtitleError, SubtitleParseError
from PySubforge.SubtitleFileHandler import SubtitleFileHandler, default_encoding
from PySubforge.SubtitleFormatRegistry import SubtitleFormat, SubtitleFormatRegistry

class Subtitles:
    """
    High level class for loading, exporting and saving a subtitle document
    """

    def __init__(self, filepath: str|None = None, settings: SettingsType|None = None) -> None:
        self.entries : list[SubtitleEntry] = []
        self.diagnostics : list[SubtitleParseError] = []
        self.lock = threading.RLock()

        self.sourcepath : str|None = GetInputPath(filepath)

        self.metadata : dict[str, Any] = {}
        self.file_format : str|None = None

        self.settings : Options = Options(deepcopy(settings)) if settings else Options()

    @property
    def has_subtitles(self) -> bool:
        return self.linecount > 0

    @property
    def linecount(self) -> int:
        with self.lock:
            return len(self.entries)

    def GetEntry(self, entry_id : str) -> SubtitleEntry|None:
        """
        Get an entry by its identifier
        """
        with self.lock:
            return next((entry for entry in self.entries if entry.id == entry_id), None)

    def GetEntryIndex(self, entry_id : str) -> int:
        """
        Get the position of an entry in the document
        """
        with self.lock:
            for index, entry in enumerate(self.entries):
                if entry.id == entry_id:
                    return index

        raise SubtitleError(f"Entry {entry_id} does not exist")

    def LoadSubtitles(self, filepath: str|None = None) -> None:
        """
        Load subtitles from a file
        """
        if filepath:
            self.sourcepath = GetInputPath(filepath)

        if not self.sourcepath:
            raise ValueError("No source path set for subtitles")

        try:
            file_handler : SubtitleFileHandler = SubtitleFormatRegistry.create_handler(filename=self.sourcepath, settings=self.settings)
            data = file_handler.load_file(self.sourcepath)

        except (ValueError, SubtitleParseError) as e:
            logging.debug(f"Error loading file: {e}")
            logging.warning("Unable to load file by extension... attempting format detection")
            data = SubtitleFormatRegistry.detect_format_and_load_file(self.sourcepath, self.settings)

        logging.info(f"Loaded {len(data.entries)} subtitles from {self.sourcepath}")
        self._set_data(data)

    def LoadSubtitlesFromString(self, subtitles_string: str, file_handler: SubtitleFileHandler|None = None) -> None:
        """
        Load subtitles from a string, detecting the format if no handler is given
        """
        if file_handler is None:
            data = SubtitleFormatRegistry.detect_format_and_parse_string(subtitles_string, self.settings)
        else:
            data = file_handler.parse_string(subtitles_string)

        self._set_data(data)

    def ExportSubtitles(self, format_tag : str|SubtitleFormat|None = None) -> str:
        """
        Serialize the subtitles in the requested format (or the configured export format)
        """
        format_tag = format_tag or self.settings.export_format
        file_handler = SubtitleFormatRegistry.create_export_handler(format_tag, strict=self.settings.strict_format)

        with self.lock:
            data = SubtitleData(entries=list(self.entries), metadata=self.metadata)
            return file_handler.compose(data)

    def SaveSubtitles(self, outputpath : str, format_tag : str|SubtitleFormat|None = None) -> None:
        """
        Write the subtitles to a file, in the format given or deduced from the file extension
        """
        if not outputpath:
            raise SubtitleError("No file path set")

        outputpath = os.path.normpath(outputpath)
        format_tag = format_tag or SubtitleFormatRegistry.get_format_from_filename(outputpath)

        content = self.ExportSubtitles(format_tag)

        logging.info(f"Saving subtitles to {outputpath}")
        with open(outputpath, 'w', encoding=default_encoding, newline='') as f:
            f.write(content)

    def GetExportFilename(self, format_tag : str|SubtitleFormat|None = None) -> str:
        """
        Suggested file name for exporting in a format
        """
        subtitle_format = SubtitleFormat.from_tag(format_tag or self.settings.export_format) or SubtitleFormat.SRT
        return GetExportFilename(self.sourcepath, subtitle_format.extension)

    def GetMimeType(self, format_tag : str|SubtitleFormat|None = None) -> str:
        return SubtitleFormatRegistry.get_mime_type(format_tag or self.settings.export_format)

    def SerialiseEntries(self) -> str:
        """
        Serialise the entries as a JSON array of records for external storage
        """
        with self.lock:
            return json.dumps([ entry.to_dict() for entry in self.entries ], ensure_ascii=False)

    def DeserialiseEntries(self, content : str) -> None:
        """
        Replace the entries with records previously produced by SerialiseEntries
        """
        try:
            records = json.loads(content)
        except json.JSONDecodeError as e:
            raise SubtitleParseError(f"Stored subtitles are not valid JSON: {e}", e)

        if not isinstance(records, list):
            raise SubtitleParseError("Stored subtitles are not a list of entries")

        entries = [ SubtitleEntry.from_dict(record) for record in records ]
        with self.lock:
            self.entries = entries

    def UpdateSettings(self, settings: SettingsType) -> None:
        """
        Update the subtitle settings
        """
        with self.lock:
            self.settings.update(settings)

    def _set_data(self, data : SubtitleData) -> None:
        with self.lock:
            self.entries = data.entries
            self.metadata = data.metadata
            self.diagnostics = data.diagnostics
            self.file_format = data.detected_format
