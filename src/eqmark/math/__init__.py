"""Math rendering and notation conversion used by the exporters."""

from .renderer import KaTeXMarkupRenderer, MathRenderer
from .typst_converter import MathConverter, convert_math_notation

__all__ = [
    "KaTeXMarkupRenderer",
    "MathConverter",
    "MathRenderer",
    "convert_math_notation",
]
