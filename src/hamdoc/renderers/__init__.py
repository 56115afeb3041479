"""Bundled renderer implementations."""

from .base import Renderer
from .html import HtmlRenderer
from .text import TextRenderer

__all__ = ["HtmlRenderer", "Renderer", "TextRenderer"]
