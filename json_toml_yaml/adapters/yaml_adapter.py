"""
YAML format adapter.

Uses PyYAML's safe loader and dumper; keys keep their insertion order and
output is block style.
"""

import yaml
from typing import Any

from ..core.adapter_interface import FormatAdapter, to_plain
from ..core.formats import DataFormat


class YamlAdapter(FormatAdapter):
    """Adapter for YAML documents."""

    @property
    def format(self) -> DataFormat:
        return DataFormat.YAML

    def loads(self, content: str) -> Any:
        try:
            return to_plain(yaml.safe_load(content))
        except yaml.YAMLError as e:
            raise self._parse_error(e) from e

    def dumps(self, value: Any) -> str:
        try:
            return yaml.safe_dump(value, default_flow_style=False,
                                  sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as e:
            raise self._serialize_error(e) from e
