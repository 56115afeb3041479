"""Find markup structure once, render it to any number of formats."""

from .document import AsciiDocDocument, Document
from .errors import HamdocError, MatchContractViolation, UnsupportedConstructKind
from .models import Binding, Construct, Match, OneLineTitle, SkeletonState, TwoLineTitle
from .renderers import HtmlRenderer, Renderer, TextRenderer

__version__ = "0.1.0"

__all__ = [
    "AsciiDocDocument",
    "Binding",
    "Construct",
    "Document",
    "HamdocError",
    "HtmlRenderer",
    "Match",
    "MatchContractViolation",
    "OneLineTitle",
    "Renderer",
    "SkeletonState",
    "TextRenderer",
    "TwoLineTitle",
    "UnsupportedConstructKind",
]
