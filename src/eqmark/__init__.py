"""eqmark: color-annotated equations exported to HTML, LaTeX, Beamer and Typst."""

from __future__ import annotations

from eqmark.colors import BUILTIN_SCHEMES, DEFAULT_SCHEME, ColorScheme, color_for, get_scheme, load_scheme
from eqmark.interaction import IDLE, InteractionState, Kind, clear, click, hover, unhover
from eqmark.parser import AnnotationParser, ParsedContent, parse_content
from eqmark.renderer import FORMATS, export, file_extension

__version__ = "0.1.0"

__all__ = [
    "AnnotationParser",
    "BUILTIN_SCHEMES",
    "ColorScheme",
    "DEFAULT_SCHEME",
    "FORMATS",
    "IDLE",
    "InteractionState",
    "Kind",
    "ParsedContent",
    "clear",
    "click",
    "color_for",
    "export",
    "file_extension",
    "get_scheme",
    "hover",
    "load_scheme",
    "parse_content",
    "unhover",
]
