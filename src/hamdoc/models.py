from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, NamedTuple, Tuple


# Underline character for each section level, top level first.
TITLE_UNDERLINES: Tuple[str, ...] = ("=", "-", "~", "^", "+")
MAX_TITLE_LEVEL = len(TITLE_UNDERLINES) - 1


def check_title_level(level: int) -> int:
    if not 0 <= level <= MAX_TITLE_LEVEL:
        raise ValueError(f"Title level must be between 0 and {MAX_TITLE_LEVEL}, got {level}.")
    return level


class SkeletonState(Enum):
    UNCOMPUTED = "uncomputed"
    COMPUTED = "computed"


@dataclass(frozen=True)
class Construct:
    """Parsed representation of one markup unit.

    Subclasses set ``kind``; renderers dispatch on it.
    """

    kind: ClassVar[str] = "construct"


@dataclass(frozen=True)
class TwoLineTitle(Construct):
    title: str
    level: int = 0

    kind: ClassVar[str] = "two_line_title"

    def __post_init__(self) -> None:
        check_title_level(self.level)


@dataclass(frozen=True)
class OneLineTitle(Construct):
    title: str
    level: int = 0

    kind: ClassVar[str] = "one_line_title"

    def __post_init__(self) -> None:
        check_title_level(self.level)


class Match(NamedTuple):
    span: str
    construct: Construct


@dataclass(frozen=True)
class Binding:
    placeholder: str
    construct: Construct
