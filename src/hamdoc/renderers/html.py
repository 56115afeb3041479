from __future__ import annotations

import html
from typing import Any, Dict

from ..models import OneLineTitle, TwoLineTitle
from ..options import parse_bool, parse_int
from ..plugins import register_renderer
from .base import Handler, Renderer


class HtmlRenderer(Renderer):
    """Render constructs as HTML fragments."""

    name = "html"

    def __init__(self, *, heading_offset: int = 0, escape: bool = True) -> None:
        self.heading_offset = heading_offset
        self.escape = escape

    def handlers(self) -> Dict[str, Handler]:
        return {
            TwoLineTitle.kind: self.render_two_line_title,
            OneLineTitle.kind: self.render_one_line_title,
        }

    def render_two_line_title(self, construct: TwoLineTitle) -> str:
        return self._heading(construct.title, construct.level)

    def render_one_line_title(self, construct: OneLineTitle) -> str:
        return self._heading(construct.title, construct.level)

    def _heading(self, title: str, level: int) -> str:
        depth = max(1, min(6, level + 1 + self.heading_offset))
        text = html.escape(title, quote=False) if self.escape else title
        return f"<h{depth}>{text}</h{depth}>"


def _html_renderer_factory(**options: Any) -> HtmlRenderer:
    return HtmlRenderer(
        heading_offset=parse_int(options.get("heading_offset"), 0),
        escape=parse_bool(options.get("escape"), True),
    )


try:
    register_renderer("html", _html_renderer_factory)
except ValueError:
    pass
