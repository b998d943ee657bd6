"""Palettes and term-to-color resolution.

Palettes are plain values handed to the exporters; nothing here is mutated at
runtime.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from eqmark.errors import InvalidColorSchemeError, PaletteTooShortError, UnknownSchemeError, UnknownTermError

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True, slots=True)
class ColorScheme:
    name: str
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        bad = [color for color in self.colors if not isinstance(color, str) or not _HEX_COLOR_RE.match(color)]
        if bad:
            raise InvalidColorSchemeError(f'Scheme "{self.name}" has invalid hex colors: {bad}')

    def __len__(self) -> int:
        return len(self.colors)


def color_for(term: str, term_order: Sequence[str], scheme: ColorScheme) -> str:
    """Return ``scheme.colors[i]`` where ``i`` is the position of ``term`` in ``term_order``."""
    try:
        index = list(term_order).index(term)
    except ValueError:
        raise UnknownTermError(term) from None
    if index >= len(scheme.colors):
        raise PaletteTooShortError(term, index, scheme.name, len(scheme.colors))
    return scheme.colors[index]


def term_colors(term_order: Sequence[str], scheme: ColorScheme) -> dict[str, str]:
    """Resolve every term strictly, preserving term order."""
    return {term: color_for(term, term_order, scheme) for term in term_order}


def hex_digits(color: str) -> str:
    """``#8b5cf6`` -> ``8B5CF6``, the form xcolor's HTML model expects."""
    digits = color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return digits.upper()


# ---------------------------------------------------------------------------
# Built-in palettes
# ---------------------------------------------------------------------------

BUILTIN_SCHEMES: Mapping[str, ColorScheme] = MappingProxyType(
    {
        "vibrant": ColorScheme(
            "Vibrant",
            (
                "#8b5cf6", "#10b981", "#ec4899", "#3b82f6", "#06b6d4", "#f59e0b",
                "#ef4444", "#a855f7", "#14b8a6", "#84cc16", "#6366f1", "#f97316",
            ),
        ),
        "accessible": ColorScheme(
            "Accessible",
            (
                "#0072B2", "#E69F00", "#009E73", "#56B4E9", "#CC79A7", "#F0E442",
                "#D55E00", "#000000", "#999999", "#4B0082", "#8B4513", "#2F4F4F",
            ),
        ),
        "contrast": ColorScheme(
            "High Contrast",
            (
                "#0066CC", "#FF6600", "#9933CC", "#00AA88", "#CC0066", "#CCAA00",
                "#CC3300", "#006600", "#660099", "#996633", "#336699", "#663366",
            ),
        ),
        "nocolor": ColorScheme("No color", ("#000000",) * 12),
        "viridis": ColorScheme(
            "Viridis",
            (
                "#440154", "#31688e", "#35b779", "#fde724", "#20908d",
                "#5ec962", "#3b528b", "#29af7f", "#2c728e", "#482173",
            ),
        ),
    }
)

DEFAULT_SCHEME = "vibrant"


def get_scheme(name: str) -> ColorScheme:
    try:
        return BUILTIN_SCHEMES[name]
    except KeyError:
        raise UnknownSchemeError(name) from None


def load_scheme(path: Path) -> ColorScheme:
    """Load a palette from a JSON file shaped ``{"name": ..., "colors": [...]}``."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidColorSchemeError(f"{path}: not valid JSON ({exc})") from exc

    if not isinstance(data, dict) or not isinstance(data.get("colors"), list):
        raise InvalidColorSchemeError(f'{path}: expected an object with a "colors" list')
    return ColorScheme(name=str(data.get("name") or path.stem), colors=tuple(data["colors"]))
