"""Placeholder tokens standing in for constructs inside skeleton text.

A token is ``{{kind:id}}``. The double brace syntax is reserved: source text
must not contain it and no matcher may match it. Nothing checks this while a
skeleton is built; see ``Document.check_source`` for an opt-in scan.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Tuple

PLACEHOLDER_OPEN = "{{"
PLACEHOLDER_CLOSE = "}}"
KIND_RE = re.compile(r"[^{}:\s]+")
PLACEHOLDER_RE = re.compile(r"\{\{(?P<kind>[^{}:\s]+):(?P<id>\d+)\}\}")


def make_placeholder(kind: str, binding_id: int) -> str:
    if binding_id < 0:
        raise ValueError(f"Placeholder id must be non-negative, got {binding_id}.")
    if not KIND_RE.fullmatch(kind):
        raise ValueError(f"Placeholder kind must be non-empty without braces, colons or whitespace, got {kind!r}.")
    return f"{PLACEHOLDER_OPEN}{kind}:{binding_id}{PLACEHOLDER_CLOSE}"


def parse_placeholder(token: str) -> Optional[Tuple[str, int]]:
    match = PLACEHOLDER_RE.fullmatch(token)
    if not match:
        return None
    return match.group("kind"), int(match.group("id"))


def iter_placeholders(text: str) -> Iterator[re.Match[str]]:
    return PLACEHOLDER_RE.finditer(text)
