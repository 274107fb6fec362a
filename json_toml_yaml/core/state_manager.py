"""
Persisted UI state.

The only state that outlives a session is whether the About dialog opens on
startup. It lives in ~/.json_toml_yaml_state.json unless another path is
given.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_STATE_FILE = Path.home() / ".json_toml_yaml_state.json"


class UIStateManager:
    """Loads and saves UI state as JSON."""

    DEFAULTS: Dict[str, Any] = {"show_about": True}

    def __init__(self, state_file: Optional[Path] = None):
        self.state_file = state_file or DEFAULT_STATE_FILE
        self.state = self._load_state()

    def _load_state(self) -> Dict[str, Any]:
        state = dict(self.DEFAULTS)
        if self.state_file.exists():
            try:
                with open(self.state_file, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    state.update(loaded)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable state file %s: %s", self.state_file, e)
        return state

    def save(self):
        """Write state to disk."""
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.state_file, 'w', encoding='utf-8') as f:
            json.dump(self.state, f, indent=2)

    def get_show_about(self) -> bool:
        return bool(self.state.get("show_about", True))

    def set_show_about(self, visible: bool):
        """Remember whether the About dialog opens on startup and save."""
        self.state["show_about"] = bool(visible)
        self.save()
