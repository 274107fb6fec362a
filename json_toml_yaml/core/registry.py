"""
Format registry.

Keeps one adapter per format and answers "which adapter handles this
file?" for the command-line conversion mode.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .adapter_interface import FormatAdapter
from .formats import DataFormat

logger = logging.getLogger(__name__)


class FormatRegistry:
    """Registry of available format adapters, keyed by format name."""

    def __init__(self):
        self._adapters: Dict[str, FormatAdapter] = {}

    def register(self, adapter: FormatAdapter):
        """
        Register an adapter.

        Raises:
            ValueError: if an adapter for the same format is already registered
        """
        name = adapter.format_name
        if name in self._adapters:
            raise ValueError(f"Format '{name}' is already registered")
        self._adapters[name] = adapter
        logger.debug("Registered %s adapter", name)

    def unregister(self, format_name: Union[str, DataFormat]):
        """Remove an adapter; unknown names are ignored."""
        self._adapters.pop(self._key(format_name), None)

    def get_adapter(self, format_name: Union[str, DataFormat]) -> Optional[FormatAdapter]:
        """Look up an adapter by name or DataFormat. Returns None if unknown."""
        return self._adapters.get(self._key(format_name))

    def detect_format(self, file_path: Path) -> Optional[FormatAdapter]:
        """Return the first adapter that can handle the file, if any."""
        for adapter in self._adapters.values():
            if adapter.can_handle(file_path):
                return adapter
        return None

    def list_formats(self) -> List[str]:
        return list(self._adapters.keys())

    @staticmethod
    def _key(format_name: Union[str, DataFormat]) -> str:
        if isinstance(format_name, DataFormat):
            return format_name.value
        return format_name.lower()


def default_registry() -> FormatRegistry:
    """Registry with the JSON, TOML and YAML adapters."""
    from ..adapters import JsonAdapter, TomlAdapter, YamlAdapter

    registry = FormatRegistry()
    registry.register(JsonAdapter())
    registry.register(TomlAdapter())
    registry.register(YamlAdapter())
    return registry
