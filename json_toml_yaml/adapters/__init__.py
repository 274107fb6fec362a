"""
Format adapters for converting between text and plain Python data.

Each adapter knows how to:
- Parse its format into dicts, lists and scalars
- Serialize such data back into pretty-printed text
- Report failures as ConversionError with the library's message

Available adapters:
- JsonAdapter: JSON via the standard json module
- TomlAdapter: TOML via the toml package
- YamlAdapter: YAML via PyYAML (safe loader and dumper)
"""

from .json_adapter import JsonAdapter
from .toml_adapter import TomlAdapter
from .yaml_adapter import YamlAdapter

__all__ = [
    'JsonAdapter',
    'TomlAdapter',
    'YamlAdapter',
]
