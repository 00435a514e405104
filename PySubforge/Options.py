from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from PySubforge.SettingsType import SettingType, SettingsType

def env_bool(key : str, default : bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes')

def env_float(key : str, default : float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logging.warning(f"Ignoring invalid value for {key}: {value!r}")
        return default

def env_int(key : str, default : int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logging.warning(f"Ignoring invalid value for {key}: {value!r}")
        return default

default_settings : dict[str, SettingType] = {
    'max_characters': env_int('PYSUBFORGE_MAX_CHARACTERS', 50),
    'default_duration': env_float('PYSUBFORGE_DEFAULT_DURATION', 3.0),
    'entry_gap': env_float('PYSUBFORGE_ENTRY_GAP', 1.0),
    'export_format': os.getenv('PYSUBFORGE_EXPORT_FORMAT', 'srt'),
    'strict_format': env_bool('PYSUBFORGE_STRICT_FORMAT', False),
    'template': 'custom',
}

class Options(SettingsType):
    """
    Settings for editing and exporting subtitles, with defaults for anything not specified.

    Defaults can be overridden with PYSUBFORGE_* environment variables.
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        super().__init__(default_settings)

        if settings:
            self.update(SettingsType(settings))

        if kwargs:
            self.update(kwargs)

    @property
    def max_characters(self) -> int:
        """ Advisory per-line character limit """
        return self.get_int('max_characters') or 0

    @property
    def default_duration(self) -> float:
        """ Duration in seconds of a newly created entry """
        return self.get_float('default_duration') or 0.0

    @property
    def entry_gap(self) -> float:
        """ Gap in seconds between the previous entry and a newly created one """
        return self.get_float('entry_gap') or 0.0

    @property
    def default_duration_ms(self) -> int:
        return self.get_milliseconds('default_duration')

    @property
    def entry_gap_ms(self) -> int:
        return self.get_milliseconds('entry_gap')

    @property
    def export_format(self) -> str:
        return self.get_str('export_format') or 'srt'

    @property
    def strict_format(self) -> bool:
        """ Raise for unknown export formats instead of falling back to SRT """
        return self.get_bool('strict_format')

    @property
    def template(self) -> str|None:
        return self.get_str('template')
