# Sample documents and test plugins
from .sample_documents import (
    DUPLICATE_TITLES,
    MIXED_LEVELS,
    NO_MARKUP,
    THREE_TITLES,
    FixedMatcher,
    Strong,
    StrongHtmlRenderer,
    StrongMatcher,
)

__all__ = [
    "DUPLICATE_TITLES",
    "MIXED_LEVELS",
    "NO_MARKUP",
    "THREE_TITLES",
    "FixedMatcher",
    "Strong",
    "StrongHtmlRenderer",
    "StrongMatcher",
]
