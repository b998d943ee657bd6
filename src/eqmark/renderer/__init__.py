"""Renderer package and format dispatcher."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Protocol

from eqmark.colors import ColorScheme
from eqmark.errors import UnknownFormatError
from eqmark.parser.base import ParsedContent

from .beamer_renderer import BeamerRenderer
from .html_renderer import HTMLRenderer
from .latex_renderer import LaTeXRenderer
from .typst_renderer import TypstRenderer


class Renderer(Protocol):
    def render(self, content: ParsedContent, scheme: ColorScheme) -> str:  # pragma: no cover - structural protocol
        """Render parsed content into a complete document."""


_RENDERERS: Mapping[str, Callable[..., Renderer]] = MappingProxyType(
    {
        "html": HTMLRenderer,
        "latex": LaTeXRenderer,
        "beamer": BeamerRenderer,
        "typst": TypstRenderer,
    }
)

FORMATS: Mapping[str, str] = MappingProxyType(
    {
        "html": ".html",
        "latex": ".tex",
        "beamer": ".tex",
        "typst": ".typ",
    }
)


def get_renderer(format_name: str, **options: Any) -> Renderer:
    try:
        factory = _RENDERERS[format_name]
    except KeyError:
        raise UnknownFormatError(format_name) from None
    return factory(**options)


def file_extension(format_name: str) -> str:
    try:
        return FORMATS[format_name]
    except KeyError:
        raise UnknownFormatError(format_name) from None


def export(format_name: str, content: ParsedContent, scheme: ColorScheme, **options: Any) -> str:
    """Render ``content`` in ``format_name``; ``options`` go to the renderer constructor."""
    return get_renderer(format_name, **options).render(content, scheme)


__all__ = [
    "BeamerRenderer",
    "FORMATS",
    "HTMLRenderer",
    "LaTeXRenderer",
    "Renderer",
    "TypstRenderer",
    "export",
    "file_extension",
    "get_renderer",
]
