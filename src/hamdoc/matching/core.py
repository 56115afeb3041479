from __future__ import annotations

import re
from typing import ClassVar, List, Pattern, Protocol

from ..models import Construct, Match


class Matcher(Protocol):
    """Finds every occurrence of one construct kind in a text snapshot.

    ``find_matches`` returns matches ordered by start position and never
    overlapping; each span must be a literal substring of ``text``.
    ``kind_name`` is the placeholder namespace and must not change.
    """

    def find_matches(self, text: str) -> List[Match]:
        ...

    def kind_name(self) -> str:
        ...


class RegexMatcher:
    """Matcher backed by one compiled pattern, scanned left to right."""

    namespace: ClassVar[str] = "construct"

    def __init__(self, pattern: Pattern[str]) -> None:
        self.pattern = pattern

    def find_matches(self, text: str) -> List[Match]:
        matches: List[Match] = []
        for found in self.pattern.finditer(text):
            construct = self.build_construct(found)
            if construct is None:
                continue
            matches.append(Match(found.group(0), construct))
        return matches

    def kind_name(self) -> str:
        return self.namespace

    def build_construct(self, found: re.Match[str]) -> Construct | None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern.pattern!r})"
