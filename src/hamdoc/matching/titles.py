"""Section title matchers.

A two line title is a title line, starting hard against the left margin,
followed by an underline of one repeated character. The character gives the
level::

    Level 0 (top level):     ======================
    Level 1:                 ----------------------
    Level 2:                 ~~~~~~~~~~~~~~~~~~~~~~
    Level 3:                 ^^^^^^^^^^^^^^^^^^^^^^
    Level 4 (bottom level):  ++++++++++++++++++++++

The underline needs at least two characters; its length is not compared to
the title, so ``"Coucou\\n=="`` is a level 0 title.

A one line title uses a marker of ``level + 1`` equal signs instead::

    == Level One Section Title
"""

from __future__ import annotations

import re

from ..models import MAX_TITLE_LEVEL, TITLE_UNDERLINES, OneLineTitle, TwoLineTitle, check_title_level
from .core import RegexMatcher

TITLE_NAMESPACE = "title"

# Lines opening with a placeholder token belong to an earlier matcher.
_TITLE_LINE = r"(?!\{\{)(?P<title>\S[^\n]*?)"

ONE_LINE_TITLE_PATTERN = re.compile(
    rf"^(?P<marker>={{1,{MAX_TITLE_LEVEL + 1}}})[ \t]+{_TITLE_LINE}(?:[ \t]+(?P=marker))?[ \t\r]*$",
    re.MULTILINE,
)


def two_line_title_pattern(level: int) -> re.Pattern[str]:
    underline = re.escape(TITLE_UNDERLINES[check_title_level(level)])
    return re.compile(
        rf"^{_TITLE_LINE}[ \t\r]*\n(?P<underline>{underline}{{2,}})[ \t\r]*$",
        re.MULTILINE,
    )


class TwoLineTitleMatcher(RegexMatcher):
    namespace = TITLE_NAMESPACE

    def __init__(self, level: int = 0) -> None:
        super().__init__(two_line_title_pattern(level))
        self.level = level

    def build_construct(self, found: re.Match[str]) -> TwoLineTitle:
        return TwoLineTitle(title=found.group("title"), level=self.level)


class OneLineTitleMatcher(RegexMatcher):
    namespace = TITLE_NAMESPACE

    def __init__(self) -> None:
        super().__init__(ONE_LINE_TITLE_PATTERN)

    def build_construct(self, found: re.Match[str]) -> OneLineTitle:
        return OneLineTitle(title=found.group("title"), level=len(found.group("marker")) - 1)
