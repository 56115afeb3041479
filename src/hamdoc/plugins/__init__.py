from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from .registry import PluginRegistry

if TYPE_CHECKING:
    from ..document import Document
    from ..renderers.base import Renderer


class DocumentFactory(Protocol):
    def __call__(self, text: str, **kwargs: Any) -> Document:
        ...


class RendererFactory(Protocol):
    def __call__(self, **options: Any) -> Renderer:
        ...


document_plugins = PluginRegistry[DocumentFactory]("Document type")
renderer_plugins = PluginRegistry[RendererFactory]("Renderer")


def register_document(name: str, factory: DocumentFactory) -> None:
    document_plugins.register(name, factory)


def register_renderer(name: str, factory: RendererFactory) -> None:
    renderer_plugins.register(name, factory)


def get_document_factory(name: str) -> DocumentFactory:
    return document_plugins.get(name)


def get_renderer_factory(name: str) -> RendererFactory:
    return renderer_plugins.get(name)


def available_documents() -> list[str]:
    return document_plugins.names()


def available_renderers() -> list[str]:
    return renderer_plugins.names()


__all__ = [
    "DocumentFactory",
    "PluginRegistry",
    "RendererFactory",
    "available_documents",
    "available_renderers",
    "get_document_factory",
    "get_renderer_factory",
    "register_document",
    "register_renderer",
]
