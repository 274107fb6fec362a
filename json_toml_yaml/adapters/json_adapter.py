"""
JSON format adapter.

Output is indented by two spaces and keeps non-ASCII characters as-is.
Dates and times (which TOML and YAML can produce) are written as ISO-8601
strings since JSON has no temporal type.
"""

import json
from typing import Any

from ..core.adapter_interface import FormatAdapter, is_temporal, to_plain
from ..core.formats import DataFormat


class JsonAdapter(FormatAdapter):
    """Adapter for JSON documents."""

    @property
    def format(self) -> DataFormat:
        return DataFormat.JSON

    def loads(self, content: str) -> Any:
        try:
            return to_plain(json.loads(content))
        except json.JSONDecodeError as e:
            raise self._parse_error(e) from e

    def dumps(self, value: Any) -> str:
        try:
            return json.dumps(value, indent=2, ensure_ascii=False, default=self._default)
        except (TypeError, ValueError) as e:
            raise self._serialize_error(e) from e

    @staticmethod
    def _default(value: Any) -> Any:
        if is_temporal(value):
            return value.isoformat()
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
