from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict

from ..errors import UnsupportedConstructKind
from ..models import Construct

Handler = Callable[[Any], str]


class Renderer:
    """Turns constructs into text for one output format.

    Subclasses map each construct kind they support to a method in
    ``handlers``; asking for any other kind raises
    ``UnsupportedConstructKind``.
    """

    name: ClassVar[str] = "renderer"

    def handlers(self) -> Dict[str, Handler]:
        return {}

    def supports(self, kind: str) -> bool:
        return kind in self.handlers()

    def render(self, construct: Construct) -> str:
        handler = self.handlers().get(construct.kind)
        if handler is None:
            raise UnsupportedConstructKind(self.name, construct.kind)
        return handler(construct)
