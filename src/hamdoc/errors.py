"""Exceptions raised while building skeletons and rendering documents.

Both failures are deterministic logic errors: callers get them immediately and
nothing is retried. A failed skeleton computation leaves the document
uncomputed; a failed render leaves the cached skeleton and bindings intact so
another renderer can be tried.

Placeholder collisions (source text already containing ``{{kind:n}}`` tokens)
are a precondition on callers and matcher authors, not an exception.
"""

from __future__ import annotations

__all__ = [
    "HamdocError",
    "MatchContractViolation",
    "UnsupportedConstructKind",
]


class HamdocError(RuntimeError):
    """Base exception for skeleton and render failures."""


class MatchContractViolation(HamdocError):
    """Raised when a matcher returns a span that is not in the scanned text."""

    def __init__(self, kind: str, span: str) -> None:
        super().__init__(f"Matcher '{kind}' returned a span not present in the scanned text: {span!r}")
        self.kind = kind
        self.span = span


class UnsupportedConstructKind(HamdocError):
    """Raised when a renderer has no handler for a construct kind."""

    def __init__(self, renderer: str, kind: str) -> None:
        super().__init__(f"Renderer '{renderer}' cannot render constructs of kind '{kind}'.")
        self.renderer = renderer
        self.kind = kind
