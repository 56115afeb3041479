"""Matchers locating markup constructs in raw text."""

from .core import Matcher, RegexMatcher
from .titles import (
    ONE_LINE_TITLE_PATTERN,
    TITLE_NAMESPACE,
    OneLineTitleMatcher,
    TwoLineTitleMatcher,
    two_line_title_pattern,
)

__all__ = [
    "Matcher",
    "ONE_LINE_TITLE_PATTERN",
    "OneLineTitleMatcher",
    "RegexMatcher",
    "TITLE_NAMESPACE",
    "TwoLineTitleMatcher",
    "two_line_title_pattern",
]
