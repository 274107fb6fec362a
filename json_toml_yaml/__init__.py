"""
Live JSON / TOML / YAML converter.

Edit any of the three representations and the other two follow.
"""

__version__ = "0.1.0"
