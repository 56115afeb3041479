from __future__ import annotations

import logging
from typing import Dict, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginRegistry(Generic[T]):
    def __init__(self, label: str = "Plugin") -> None:
        self._label = label
        self._factories: Dict[str, T] = {}

    def register(self, name: str, factory: T) -> None:
        if name in self._factories:
            raise ValueError(f"{self._label} '{name}' is already registered.")
        self._factories[name] = factory
        logger.debug("Registered %s '%s'", self._label.lower(), name)

    def get(self, name: str) -> T:
        try:
            return self._factories[name]
        except KeyError as exc:
            raise KeyError(f"{self._label} '{name}' is not registered.") from exc

    def names(self) -> List[str]:
        return sorted(self._factories.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._factories
