"""Core intermediate representation (IR) for annotated equations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

# Neutral wrapper syntax shared by the parser output and every exporter.
TERM_CLASS_PREFIX = "term-"
EQUATION_SPAN_OPEN = "\\htmlClass{"
DESCRIPTION_SPAN_OPEN = '<span class="term-'
DESCRIPTION_SPAN_CLOSE = "</span>"


def equation_span(term: str, content: str) -> str:
    return f"{EQUATION_SPAN_OPEN}{TERM_CLASS_PREFIX}{term}}}{{{content}}}"


def description_span(term: str, text: str) -> str:
    return f'{DESCRIPTION_SPAN_OPEN}{term}">{text}{DESCRIPTION_SPAN_CLOSE}'


@dataclass(frozen=True, slots=True)
class TaggedSpan:
    """One annotated fragment found during a transform pass.

    ``index`` counts every span met in the pass, left to right, starting at 0.
    """

    term: str
    content: str
    index: int


@dataclass(frozen=True, slots=True)
class ParsedContent:
    title: str | None = None
    equation: str = ""
    description: str = ""
    definitions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    term_order: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Freeze caller-supplied containers so the structure cannot be mutated after parsing.
        if not isinstance(self.definitions, MappingProxyType):
            object.__setattr__(self, "definitions", MappingProxyType(dict(self.definitions)))
        object.__setattr__(self, "term_order", tuple(self.term_order))
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "warnings", tuple(self.warnings))

    @property
    def is_valid(self) -> bool:
        return not self.errors


class Parser(Protocol):
    def parse(self, text: str) -> ParsedContent:  # pragma: no cover - structural protocol
        """Parse annotated source text into ParsedContent."""

    def parse_file(self, input_path: Path) -> ParsedContent:  # pragma: no cover - structural protocol
        """Read and parse an annotated source file."""
