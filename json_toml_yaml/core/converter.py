"""
Three-pane conversion model.

The converter owns one text buffer per format and a notion of which pane
currently has focus. On every sync the focused pane is the source of
truth: its text is parsed and the other two buffers are overwritten with
the re-serialized value, or with the error message when parsing or
serializing fails.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from .formats import ConversionError, DataFormat
from .registry import FormatRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Outcome of one Converter.sync() call."""
    source: Optional[DataFormat] = None
    outputs: Dict[DataFormat, str] = field(default_factory=dict)
    errors: Dict[DataFormat, ConversionError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class Converter:
    """
    Text buffers for the JSON, TOML and YAML panes.

    Usage:
        converter = Converter()
        converter.set_text(DataFormat.JSON, '{"a": 1}')
        converter.focus(DataFormat.JSON)
        converter.sync()
        converter.text(DataFormat.TOML)  # 'a = 1\\n'
    """

    def __init__(self, registry: Optional[FormatRegistry] = None):
        self.registry = registry or default_registry()
        self.texts: Dict[DataFormat, str] = {fmt: '' for fmt in DataFormat}
        self.focused: Optional[DataFormat] = None

    def text(self, fmt: DataFormat) -> str:
        return self.texts[fmt]

    def set_text(self, fmt: DataFormat, text: str):
        self.texts[fmt] = text or ''

    def focus(self, fmt: Optional[DataFormat]):
        """Mark a pane as the source of truth (None means no pane has focus)."""
        self.focused = fmt

    def sync(self) -> SyncResult:
        """Re-derive the unfocused panes from the focused one."""
        source = self.focused
        result = SyncResult(source=source)
        if source is None:
            return result

        targets = [fmt for fmt in DataFormat if fmt is not source]
        text = self.texts[source]

        if not text.strip():
            for target in targets:
                result.outputs[target] = ''
            self._apply(result)
            return result

        try:
            value = self._adapter(source).loads(text)
        except ConversionError as e:
            logger.debug("%s pane does not parse: %s", source.label, e)
            for target in targets:
                result.outputs[target] = str(e)
                result.errors[target] = e
            self._apply(result)
            return result

        for target in targets:
            try:
                result.outputs[target] = self._adapter(target).dumps(value)
            except ConversionError as e:
                logger.debug("Cannot write %s as %s: %s", source.label, target.label, e)
                result.outputs[target] = str(e)
                result.errors[target] = e

        self._apply(result)
        return result

    def _apply(self, result: SyncResult):
        for fmt, text in result.outputs.items():
            self.texts[fmt] = text

    def _adapter(self, fmt: DataFormat):
        adapter = self.registry.get_adapter(fmt)
        if adapter is None:
            raise ValueError(f"No adapter registered for {fmt.label}")
        return adapter


def convert(text: str, source: DataFormat, target: DataFormat,
            registry: Optional[FormatRegistry] = None) -> str:
    """
    Convert text from one format to another.

    Raises:
        ConversionError: if the text does not parse or the value cannot be
            written in the target format
    """
    registry = registry or default_registry()
    value = registry.get_adapter(source).loads(text)
    return registry.get_adapter(target).dumps(value)
