from __future__ import annotations
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from PySubforge.Helpers.Time import SecondsToMilliseconds

BasicType: TypeAlias = str | int | float | bool | list[str] | None
SettingType: TypeAlias = BasicType | dict[str, 'SettingType']

_true_strings = ('true', 'yes', 'on', '1')
_false_strings = ('false', 'no', 'off', '0', '')

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with type-safe getters.

    Values may arrive as strings (from the environment or a form) so every getter accepts
    a string representation of its type.
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        super().__init__(dict(settings or {}))

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a boolean setting, accepting true/false, yes/no, on/off and 1/0"""
        value = self.get(key, default)
        if value is None:
            return default

        if isinstance(value, (bool, int)):
            return bool(value)

        if isinstance(value, str):
            text = value.strip().lower()
            if text in _true_strings:
                return True
            if text in _false_strings:
                return False

        raise self._conversion_error(key, value, 'bool')

    def get_int(self, key: str, default: int|None = None) -> int|None:
        """Get an integer setting. Floats are truncated."""
        return self._get_number(key, default, int)

    def get_float(self, key: str, default: float|None = None) -> float|None:
        """Get a float setting"""
        return self._get_number(key, default, float)

    def get_milliseconds(self, key: str, default: float = 0.0) -> int:
        """Get a setting expressed in seconds as a whole number of milliseconds"""
        seconds = self.get_float(key, default)
        return SecondsToMilliseconds(seconds if seconds is not None else default)

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a string setting. Lists are joined with commas."""
        value = self.get(key, default)
        if value is None or isinstance(value, str):
            return value

        if isinstance(value, list):
            return ', '.join(str(item) for item in value)

        return str(value)

    def set(self, setting: str, value: Any) -> None:
        """Set a setting in the settings dictionary"""
        self[setting] = value

    def update(self, other=(), /, **kwds) -> None:
        """Update settings. None values are ignored so that they never replace a default."""
        if isinstance(other, Mapping):
            other = { key: value for key, value in other.items() if value is not None }
        kwds = { key: value for key, value in kwds.items() if value is not None }
        super().update(other, **kwds)

    def _get_number(self, key: str, default: Any, cast: Callable[[Any], Any]) -> Any:
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, bool):
            raise self._conversion_error(key, value, cast.__name__)

        try:
            if isinstance(value, str):
                return cast(float(value)) if cast is int and '.' in value else cast(value.strip())
            if isinstance(value, (int, float)):
                return cast(value)
        except ValueError:
            pass

        raise self._conversion_error(key, value, cast.__name__)

    @staticmethod
    def _conversion_error(key: str, value: Any, type_name: str) -> SettingsError:
        return SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {value!r} to {type_name}")
