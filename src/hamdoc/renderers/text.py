from __future__ import annotations

from typing import Any, Dict, Optional

from ..models import TITLE_UNDERLINES, OneLineTitle, TwoLineTitle
from ..options import parse_str
from ..plugins import register_renderer
from .base import Handler, Renderer


class TextRenderer(Renderer):
    """Render constructs as normalized plain text.

    Every title comes out in the two line form, underlined with its level's
    character for exactly as many characters as the title has.
    """

    name = "text"

    def __init__(self, *, underline: Optional[str] = None) -> None:
        if underline is not None and len(underline) != 1:
            raise ValueError(f"Underline must be a single character, got '{underline}'.")
        self.underline = underline

    def handlers(self) -> Dict[str, Handler]:
        return {
            TwoLineTitle.kind: self.render_two_line_title,
            OneLineTitle.kind: self.render_one_line_title,
        }

    def render_two_line_title(self, construct: TwoLineTitle) -> str:
        return self._underlined(construct.title, construct.level)

    def render_one_line_title(self, construct: OneLineTitle) -> str:
        return self._underlined(construct.title, construct.level)

    def _underlined(self, title: str, level: int) -> str:
        char = self.underline or TITLE_UNDERLINES[level]
        return f"{title}\n{char * len(title)}"


def _text_renderer_factory(**options: Any) -> TextRenderer:
    return TextRenderer(underline=parse_str(options.get("underline")))


try:
    register_renderer("text", _text_renderer_factory)
except ValueError:
    pass
