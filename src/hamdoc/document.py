from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Tuple, Union

from .errors import MatchContractViolation
from .matching import Matcher, OneLineTitleMatcher, TwoLineTitleMatcher
from .models import MAX_TITLE_LEVEL, Binding, Construct, SkeletonState
from .placeholders import iter_placeholders, make_placeholder
from .plugins import register_document

logger = logging.getLogger(__name__)

Segment = Union[str, Construct]


class SupportsRender(Protocol):
    def render(self, construct: Construct) -> str:
        ...


class Document:
    """Raw markup text plus the matchers registered for its document type.

    The skeleton (raw text with every matched span swapped for a placeholder
    token) and the bindings are computed on first access and kept for the
    lifetime of the document. Rendering always starts again from that cached
    skeleton, so one document can be rendered with any number of renderers.

    A document has a single owner: the first skeleton computation mutates
    state without a lock, so concurrent first reads from several threads must
    be serialized by the caller.
    """

    def __init__(self, text: str, matchers: Optional[Iterable[Matcher]] = None) -> None:
        self._text = text
        self._matchers: Tuple[Matcher, ...] = tuple(self.default_matchers() if matchers is None else matchers)
        self._state = SkeletonState.UNCOMPUTED
        self._skeleton: Optional[str] = None
        self._bindings: List[Binding] = []

    def default_matchers(self) -> List[Matcher]:
        return []

    @property
    def text(self) -> str:
        return self._text

    @property
    def matchers(self) -> Tuple[Matcher, ...]:
        return self._matchers

    @property
    def state(self) -> SkeletonState:
        return self._state

    @property
    def skeleton(self) -> str:
        return self.compute_skeleton()

    @property
    def bindings(self) -> Tuple[Binding, ...]:
        self.compute_skeleton()
        return tuple(self._bindings)

    def compute_skeleton(self) -> str:
        if self._state is SkeletonState.COMPUTED and self._skeleton is not None:
            return self._skeleton
        skeleton = self._text
        bindings: List[Binding] = []
        for matcher in self._matchers:
            kind = matcher.kind_name()
            matches = matcher.find_matches(skeleton)
            logger.debug("Matcher %r found %d match(es)", matcher, len(matches))
            for span, construct in matches:
                index = skeleton.find(span) if span else -1
                if index < 0:
                    raise MatchContractViolation(kind, span)
                placeholder = make_placeholder(kind, len(bindings))
                bindings.append(Binding(placeholder, construct))
                skeleton = skeleton[:index] + placeholder + skeleton[index + len(span):]
        self._skeleton = skeleton
        self._bindings = bindings
        self._state = SkeletonState.COMPUTED
        logger.debug("Skeleton computed with %d binding(s)", len(bindings))
        return skeleton

    def render(self, renderer: SupportsRender) -> str:
        result = self.compute_skeleton()
        for binding in self._bindings:
            result = result.replace(binding.placeholder, renderer.render(binding.construct), 1)
        logger.debug("Rendered %d binding(s) with %s", len(self._bindings), type(renderer).__name__)
        return result

    def segments(self) -> List[Segment]:
        """Split the skeleton into literal text and constructs, in document order."""
        skeleton = self.compute_skeleton()
        constructs = {binding.placeholder: binding.construct for binding in self._bindings}
        pieces: List[Segment] = []
        position = 0
        for found in iter_placeholders(skeleton):
            construct = constructs.get(found.group(0))
            if construct is None:
                continue
            if found.start() > position:
                pieces.append(skeleton[position:found.start()])
            pieces.append(construct)
            position = found.end()
        if position < len(skeleton):
            pieces.append(skeleton[position:])
        return pieces

    def check_source(self) -> List[str]:
        """Return placeholder tokens already present in the raw text.

        Such tokens collide with the reserved placeholder syntax and make the
        skeleton ambiguous.
        """
        collisions = [found.group(0) for found in iter_placeholders(self._text)]
        if collisions:
            logger.warning("Source text contains %d reserved placeholder token(s): %s", len(collisions), ", ".join(collisions))
        return collisions

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state.value}, matchers={len(self._matchers)}, bindings={len(self._bindings)})"


class AsciiDocDocument(Document):
    def default_matchers(self) -> List[Matcher]:
        matchers: List[Matcher] = [TwoLineTitleMatcher(level) for level in range(MAX_TITLE_LEVEL + 1)]
        matchers.append(OneLineTitleMatcher())
        return matchers


def _asciidoc_document_factory(text: str, **_: object) -> AsciiDocDocument:
    return AsciiDocDocument(text)


try:
    register_document("asciidoc", _asciidoc_document_factory)
except ValueError:
    pass
