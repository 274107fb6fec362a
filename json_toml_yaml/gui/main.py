from pathlib import Path
from typing import Dict, Optional

from nicegui import ui

from ..core.converter import Converter
from ..core.formats import DataFormat
from ..core.state_manager import UIStateManager

TITLE = 'JSON to TOML to YAML converter'
DEFAULT_EDITOR_THEME = 'oneDark'

ABOUT_TEXT = """
Type or paste JSON, TOML or YAML into any pane. The pane you are editing is
the source of truth: the other two panes are rewritten from it as you type.

When the text does not parse, or the data cannot be written in another
format, the error message is shown in place of the converted text.

TOML has no null value and its documents are always tables, so `null`
values and top-level arrays or scalars cannot be converted to TOML.
"""

# Set by start() before the server runs
PAGE_OPTIONS = {'editor_theme': DEFAULT_EDITOR_THEME, 'state_file': None}


class ConverterApp:
    def __init__(self, state_manager: UIStateManager, editor_theme: str = DEFAULT_EDITOR_THEME):
        self.model = Converter()
        self.state_manager = state_manager
        self.editor_theme = editor_theme
        self._syncing = False

        # UI Elements (to be initialized in setup_ui)
        self.editors: Dict[DataFormat, ui.codemirror] = {}
        self.about_dialog = None

    def setup_ui(self):
        with ui.header().classes('bg-primary text-white items-center justify-between'):
            ui.label(TITLE).classes('text-h6')
            ui.button('About', icon='info', on_click=self.open_about).props('flat color=white')

        with ui.row().classes('w-full no-wrap gap-4 p-2'):
            for fmt in DataFormat:
                with ui.column().classes('flex-1 min-w-0 gap-1'):
                    ui.label(fmt.label).classes('w-full text-center font-bold')
                    editor = ui.codemirror(
                        '',
                        language=fmt.label,
                        theme=self.editor_theme,
                        indent='  ',
                        on_change=self._change_handler(fmt),
                    ).classes('w-full h-[80vh] font-mono')
                    editor.on('focusin', self._focus_handler(fmt))
                    self.editors[fmt] = editor

        # About Dialog
        self.about_dialog = ui.dialog()
        with self.about_dialog, ui.card().classes('max-w-xl'):
            ui.label('About').classes('text-h6')
            ui.markdown(ABOUT_TEXT)
            with ui.row().classes('w-full items-center justify-between'):
                ui.checkbox('Show on startup', value=self.state_manager.get_show_about(),
                            on_change=lambda e: self.state_manager.set_show_about(e.value))
                ui.button('Close', on_click=self.about_dialog.close)

        if self.state_manager.get_show_about():
            self.about_dialog.open()

    def open_about(self):
        self.about_dialog.open()

    def _focus_handler(self, fmt: DataFormat):
        return lambda: self.model.focus(fmt)

    def _change_handler(self, fmt: DataFormat):
        return lambda e: self.on_edit(fmt, e.value)

    def on_edit(self, fmt: DataFormat, text: Optional[str]):
        """User typed into a pane: it becomes the source and the others follow."""
        if self._syncing:
            return
        self.model.set_text(fmt, text)
        self.model.focus(fmt)
        result = self.model.sync()
        self._syncing = True
        try:
            for target, output in result.outputs.items():
                self.editors[target].set_value(output)
        finally:
            self._syncing = False


@ui.page('/')
def main_page():
    state_manager = UIStateManager(state_file=PAGE_OPTIONS['state_file'])
    app_instance = ConverterApp(state_manager, editor_theme=PAGE_OPTIONS['editor_theme'])
    app_instance.setup_ui()


def start(port: int = 8080, native: bool = False,
          editor_theme: str = DEFAULT_EDITOR_THEME, state_file: Optional[Path] = None):
    PAGE_OPTIONS['editor_theme'] = editor_theme
    PAGE_OPTIONS['state_file'] = state_file
    ui.run(title=TITLE, reload=False, port=port, native=native, show=False)


if __name__ in {"__main__", "__mp_main__"}:
    start()
