"""
Syntax highlighting for the three formats.

Highlighting reuses Pygments: its lexers split the text into tokens and one
of its styles maps every token type to a colour. The result is a
HighlightJob, a list of coloured ranges that tile the text, which can be
laid out by a UI or rendered as 24-bit terminal escapes.

highlight() caches its results keyed by (code, language, theme), so text
that has not changed is not lexed again.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from pygments.lexers import get_lexer_for_filename
from pygments.styles import get_all_styles, get_style_by_name
from pygments.token import Token
from pygments.util import ClassNotFound

DEFAULT_THEME = 'monokai'
FALLBACK_COLOR = '#c0c5ce'


@dataclass(frozen=True)
class HighlightSection:
    """A coloured range [start, end) of the highlighted text."""
    start: int
    end: int
    color: str

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return tuple(int(self.color[i:i + 2], 16) for i in (1, 3, 5))


@dataclass(frozen=True)
class HighlightJob:
    """Highlighted text: the (newline-normalised) text and its sections."""
    text: str
    sections: Tuple[HighlightSection, ...]

    def fragments(self) -> List[Tuple[str, str]]:
        """(text, color) pairs in order."""
        return [(self.text[s.start:s.end], s.color) for s in self.sections]

    def to_ansi(self) -> str:
        """Render with 24-bit foreground colour escapes."""
        parts = []
        for section in self.sections:
            r, g, b = section.rgb
            parts.append(f'\x1b[38;2;{r};{g};{b}m{self.text[section.start:section.end]}')
        if parts:
            parts.append('\x1b[39m')
        return ''.join(parts)


class Highlighter:
    """Pygments lexers plus one Pygments style."""

    def __init__(self, theme: str = DEFAULT_THEME):
        try:
            self.style = get_style_by_name(theme)
        except ClassNotFound:
            raise ValueError(f"Unknown theme: {theme}") from None
        self.theme = theme
        self._default_color = self._color(Token) or FALLBACK_COLOR

    def lexer(self, lang: str):
        """Lexer for a language, found by its file extension."""
        try:
            return get_lexer_for_filename(f'code.{lang.lower()}', stripnl=False, ensurenl=False)
        except ClassNotFound:
            raise ValueError(f"No syntax found for language: {lang}") from None

    def highlight(self, code: str, lang: str) -> HighlightJob:
        text = normalize_newlines(code)
        sections = []
        offset = 0
        for token_type, value in self.lexer(lang).get_tokens(text):
            if not value:
                continue
            end = offset + len(value)
            color = self._color(token_type) or self._default_color
            # merge neighbours of the same colour
            if sections and sections[-1].color == color and sections[-1].end == offset:
                sections[-1] = HighlightSection(sections[-1].start, end, color)
            else:
                sections.append(HighlightSection(offset, end, color))
            offset = end
        return HighlightJob(text=text, sections=tuple(sections))

    def to_ansi(self, code: str, lang: str) -> str:
        """Render code with terminal colour escapes."""
        return highlight(code, lang, self.theme).to_ansi()

    def _color(self, token_type) -> str:
        # styles only list some token types; inherit from the nearest listed parent
        while token_type not in self.style:
            token_type = token_type.parent
        color = self.style.style_for_token(token_type)['color']
        return f'#{color}' if color else ''


def normalize_newlines(code: str) -> str:
    return code.replace('\r\n', '\n').replace('\r', '\n')


@lru_cache(maxsize=None)
def get_highlighter(theme: str = DEFAULT_THEME) -> Highlighter:
    return Highlighter(theme)


@lru_cache(maxsize=128)
def highlight(code: str, lang: str, theme: str = DEFAULT_THEME) -> HighlightJob:
    """Cached Highlighter.highlight(); unchanged text is not re-lexed."""
    return get_highlighter(theme).highlight(code, lang)


def available_themes() -> List[str]:
    return sorted(get_all_styles())
