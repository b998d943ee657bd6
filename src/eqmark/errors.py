"""Exception hierarchy shared by the parser, palettes and exporters."""

from __future__ import annotations


class EqmarkError(Exception):
    """Base class for every error raised by eqmark."""


class ColorResolutionError(EqmarkError):
    """A term could not be mapped to a palette color."""


class UnknownTermError(ColorResolutionError):
    def __init__(self, term: str) -> None:
        super().__init__(f'Term "{term}" not found in term order')
        self.term = term


class PaletteTooShortError(ColorResolutionError):
    def __init__(self, term: str, index: int, scheme_name: str, size: int) -> None:
        super().__init__(
            f'No color defined for term "{term}" at index {index} in scheme "{scheme_name}" '
            f"({size} colors available)"
        )
        self.term = term
        self.index = index
        self.scheme_name = scheme_name


class UnknownFormatError(EqmarkError, ValueError):
    def __init__(self, format_name: str) -> None:
        super().__init__(f"Unknown export format: {format_name}")
        self.format_name = format_name


class UnknownSchemeError(EqmarkError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown color scheme: {name}")
        self.name = name


class InvalidColorSchemeError(EqmarkError, ValueError):
    """A palette definition is malformed (bad JSON shape or non-hex colors)."""
