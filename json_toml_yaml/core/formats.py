"""
Data formats handled by the converter.

Every pane, adapter and CLI option refers to a format through the
DataFormat enum, so the three formats stay symmetric throughout the app.
"""

from enum import Enum
from typing import Optional, Tuple


class DataFormat(Enum):
    """Supported serialization formats."""
    JSON = 'json'
    TOML = 'toml'
    YAML = 'yaml'

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def extensions(self) -> Tuple[str, ...]:
        """File extensions for this format, primary extension first."""
        if self is DataFormat.YAML:
            return ('.yaml', '.yml')
        return (f'.{self.value}',)

    @property
    def file_extension(self) -> str:
        return self.extensions[0]

    @classmethod
    def from_name(cls, name: str) -> 'DataFormat':
        """Resolve a case-insensitive format name ('json', 'TOML', ...)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown format: {name}") from None


class ConversionError(Exception):
    """
    Parsing or serializing failed.

    The message is the underlying library's own message; it is what the
    user sees in place of converted output.
    """

    def __init__(self, message: str, format: Optional[DataFormat] = None,
                 stage: str = 'parse'):
        super().__init__(message)
        self.format = format
        self.stage = stage
