"""
TOML format adapter.

TOML is the narrowest of the three formats:
- A document is always a table, so only mappings can be serialized
- There is no null value; None anywhere in the data is an error
- Arrays hold values of one kind, and an array holding tables must hold
  nothing but tables

The toml package silently drops None values and mangles the array shapes it
does not support (a table nested in an array of arrays is written as the
list of its keys), so such values are rejected up front with the key path
that holds them.
"""

import datetime

import toml
from typing import Any

from ..core.adapter_interface import FormatAdapter, to_plain
from ..core.formats import DataFormat

# Order matters: bool is an int and datetime is a date
_KINDS = (
    (bool, 'boolean'),
    (int, 'integer'),
    (float, 'float'),
    (str, 'string'),
    (datetime.datetime, 'datetime'),
    (datetime.date, 'date'),
    (datetime.time, 'time'),
    (list, 'array'),
    (dict, 'table'),
)


class TomlAdapter(FormatAdapter):
    """Adapter for TOML documents."""

    @property
    def format(self) -> DataFormat:
        return DataFormat.TOML

    def loads(self, content: str) -> Any:
        try:
            return to_plain(toml.loads(content))
        except Exception as e:
            # the toml decoder raises bare IndexError and friends on truncated input
            raise self._parse_error(e) from e

    def dumps(self, value: Any) -> str:
        if not isinstance(value, dict):
            raise self._serialize_error(
                f"TOML documents must be a table at the top level, got {self._kind(value)}"
            )
        self._check_value(value, '')
        try:
            return toml.dumps(value)
        except (TypeError, ValueError, AttributeError) as e:
            raise self._serialize_error(e) from e

    def _check_value(self, value: Any, location: str):
        if value is None:
            raise self._serialize_error(f"unsupported None value at '{location}'")
        if isinstance(value, dict):
            for key, item in value.items():
                self._check_value(item, f'{location}.{key}' if location else str(key))
        elif isinstance(value, list):
            self._check_array(value, location)

    def _check_array(self, items: list, location: str):
        kinds = {self._kind_name(item) for item in items if item is not None}
        if 'table' in kinds and len(kinds) > 1:
            raise self._serialize_error(
                f"cannot mix tables and other values in the array at '{location}'"
            )
        if len(kinds) > 1:
            raise self._serialize_error(
                f"array at '{location}' mixes {', '.join(sorted(kinds))} values"
            )
        for index, item in enumerate(items):
            item_location = f'{location}[{index}]'
            if isinstance(item, list) and any(self._contains_table(sub) for sub in item):
                raise self._serialize_error(
                    f"tables inside nested arrays are not supported at '{item_location}'"
                )
            self._check_value(item, item_location)

    @staticmethod
    def _contains_table(value: Any) -> bool:
        if isinstance(value, dict):
            return True
        if isinstance(value, list):
            return any(TomlAdapter._contains_table(item) for item in value)
        return False

    @staticmethod
    def _kind_name(value: Any) -> str:
        for kind, name in _KINDS:
            if isinstance(value, kind):
                return name
        return type(value).__name__

    @staticmethod
    def _kind(value: Any) -> str:
        if value is None:
            return 'null'
        if isinstance(value, list):
            return 'an array'
        return f'a {type(value).__name__}'
