"""Typed parsing of ``KEY=VALUE`` renderer options."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Optional, Tuple


def split_option(token: str) -> Tuple[str, str]:
    if "=" not in token:
        raise ValueError(f"Expected KEY=VALUE format, got '{token}'.")
    key, value = token.split("=", 1)
    key = key.strip()
    if not key:
        raise ValueError("Option key cannot be empty.")
    return key, value


def parse_int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    match = re.search(r"-?\d+", str(value))
    if not match:
        return default
    return int(match.group())


def parse_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in {"true", "yes", "1", "on"}:
        return True
    if lowered in {"false", "no", "0", "off"}:
        return False
    return default


def parse_str(value: Any, default: Optional[str] = None) -> Optional[str]:
    if value is None:
        return default
    stripped = str(value).strip()
    return stripped or default


def collect_options(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    options: Dict[str, str] = {}
    for key, value in pairs:
        options[key.replace("-", "_")] = value
    return options
