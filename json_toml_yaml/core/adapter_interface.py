"""
Abstract interface for format adapters.

An adapter knows how to turn text in one format into plain Python data and
back. Everything else (which pane is authoritative, where the errors go) is
decided by the converter.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from .formats import ConversionError, DataFormat


class FormatAdapter(ABC):
    """Base class for the JSON, TOML and YAML adapters."""

    @property
    @abstractmethod
    def format(self) -> DataFormat:
        """Format handled by this adapter."""

    @property
    def format_name(self) -> str:
        return self.format.value

    @property
    def file_extension(self) -> str:
        return self.format.file_extension

    def can_handle(self, file_path: Path) -> bool:
        """Check the file suffix against the format's extensions."""
        return file_path.suffix.lower() in self.format.extensions

    @abstractmethod
    def loads(self, content: str) -> Any:
        """
        Parse text into plain Python data.

        Raises:
            ConversionError: if the text is not valid for this format
        """

    @abstractmethod
    def dumps(self, value: Any) -> str:
        """
        Serialize plain Python data.

        Raises:
            ConversionError: if the value cannot be expressed in this format
        """

    def read(self, file_path: Path) -> Any:
        """Read and parse a file."""
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
        return self.loads(content)

    def write(self, value: Any, file_path: Path):
        """Serialize a value and write it to a file."""
        content = self.dumps(value)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)

    def _parse_error(self, error: Exception) -> ConversionError:
        return ConversionError(str(error), format=self.format, stage='parse')

    def _serialize_error(self, error) -> ConversionError:
        return ConversionError(str(error), format=self.format, stage='serialize')


def to_plain(value: Any) -> Any:
    """
    Copy a parsed value into builtin containers.

    Parsers hand back dict and list subclasses (TOML inline tables, for one)
    which YAML's safe dumper will not represent.
    """
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def is_temporal(value: Any) -> bool:
    return isinstance(value, (date, datetime, time))
