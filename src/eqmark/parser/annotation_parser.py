"""Line-based parser for equation annotation markdown.

Source format::

    # Title
    $$
    \\mark[term]{latex} = ...
    $$
    ## Description
    Prose with [display text]{.term} references.
    ## .term
    Definition body, may contain $inline$ math.
"""

from __future__ import annotations

import enum
import logging
import re
from pathlib import Path
from types import MappingProxyType

from .base import ParsedContent, description_span, equation_span
from .braces import UNMATCHED, find_matching_brace
from .validation import validate_terms

logger = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"^#\s+[^#]")

EQUATION_DELIMITER = "$$"
DESCRIPTION_MARKER = "## Description"
DEFINITION_PREFIX = "## ."
MARK_OPEN = "\\mark["
REFERENCE_TERM_OPEN = "{."
# A term name holding any of these cannot round-trip through the tagged span syntax.
_NAME_BREAKERS = "[{}"


class Mode(enum.Enum):
    TITLE_SEEK = "title-seek"
    NEUTRAL = "neutral"
    EQUATION = "equation"
    DESCRIPTION = "description"
    DEFINITION = "definition"


class AnnotationParser:
    """Parse annotated markdown into ParsedContent."""

    def parse(self, text: str) -> ParsedContent:
        run = _ParseRun()
        for line in text.splitlines():
            run.feed(line)
        return run.finish()

    def parse_file(self, input_path: Path) -> ParsedContent:
        input_path = Path(input_path)
        return self.parse(input_path.read_text(encoding="utf-8"))


def parse_content(text: str) -> ParsedContent:
    return AnnotationParser().parse(text)


# ---------------------------------------------------------------------------
# Per-parse state machine
# ---------------------------------------------------------------------------

class _ParseRun:
    """Mutable state for a single parse; discarded once ``finish`` returns."""

    def __init__(self) -> None:
        self.mode = Mode.TITLE_SEEK
        self.resume_mode = Mode.TITLE_SEEK
        self.title: str | None = None
        self.equation_lines: list[str] = []
        self.description_lines: list[str] = []
        self.definitions: dict[str, str] = {}
        self.definition_name: str | None = None
        self.definition_lines: list[str] = []
        self.scanner = _LineScanner()

    def feed(self, line: str) -> None:
        stripped = line.strip()

        if stripped == EQUATION_DELIMITER:
            if self.mode is Mode.EQUATION:
                self.mode = self.resume_mode
            else:
                self.resume_mode = self.mode
                self.mode = Mode.EQUATION
            return

        if self.mode is Mode.EQUATION:
            self.equation_lines.append(self.scanner.scan_equation(line))
            return

        if self.title is None and _TITLE_RE.match(line):
            self.title = line[1:].strip()
            if self.mode is Mode.TITLE_SEEK:
                self.mode = Mode.NEUTRAL
            return

        if stripped == DESCRIPTION_MARKER:
            self.mode = Mode.DESCRIPTION
            return

        if line.startswith(DEFINITION_PREFIX):
            self._flush_definition()
            name = line[len(DEFINITION_PREFIX):].strip()
            self.definition_name = name or None
            self.mode = Mode.DEFINITION if name else Mode.NEUTRAL
            return

        if not stripped or line.startswith("#"):
            return

        if self.mode is Mode.DESCRIPTION:
            self.description_lines.append(self.scanner.scan_description(line))
        elif self.definition_name is not None:
            self.definition_lines.append(line)

    def _flush_definition(self) -> None:
        if self.definition_name is not None:
            self.definitions[self.definition_name] = "\n".join(self.definition_lines).strip()
        self.definition_name = None
        self.definition_lines = []

    def finish(self) -> ParsedContent:
        self._flush_definition()
        term_order = tuple(self.scanner.term_order)
        errors, warnings = validate_terms(term_order, self.scanner.description_terms, self.definitions)

        logger.debug(
            "Parsed %r: %d terms, %d definitions, %d errors, %d warnings",
            self.title,
            len(term_order),
            len(self.definitions),
            len(errors),
            len(warnings),
        )
        return ParsedContent(
            title=self.title,
            equation="\n".join(self.equation_lines).strip(),
            description=" ".join(self.description_lines).strip(),
            definitions=MappingProxyType(dict(self.definitions)),
            term_order=term_order,
            errors=tuple(errors),
            warnings=tuple(warnings),
        )


# ---------------------------------------------------------------------------
# Annotation scanning
# ---------------------------------------------------------------------------

class _LineScanner:
    """Cursor-based scanner for the two inline annotation constructs.

    Malformed annotations are copied through verbatim and scanning resumes just
    past the point where the construct broke.
    """

    def __init__(self) -> None:
        self.term_order: list[str] = []
        self._seen: set[str] = set()
        self.description_terms: list[str] = []

    def _register(self, term: str) -> None:
        if term not in self._seen:
            self._seen.add(term)
            self.term_order.append(term)

    def scan_equation(self, text: str) -> str:
        """Rewrite every ``\\mark[term]{...}`` in ``text``, nested ones included."""
        out: list[str] = []
        pos = 0
        while (start := text.find(MARK_OPEN, pos)) != -1:
            out.append(text[pos:start])
            pos = self._equation_annotation(text, start, out)
        out.append(text[pos:])
        return "".join(out)

    def _equation_annotation(self, text: str, start: int, out: list[str]) -> int:
        name_start = start + len(MARK_OPEN)
        name_end = text.find("]", name_start)
        if name_end == -1:
            out.append(MARK_OPEN)
            return name_start

        term = text[name_start:name_end]
        if any(char in term for char in _NAME_BREAKERS):
            out.append(MARK_OPEN)
            return name_start

        content_start = name_end + 2
        if not term or text[name_end + 1:content_start] != "{":
            out.append(text[start:name_end + 1])
            return name_end + 1

        content_end = find_matching_brace(text, content_start)
        if content_end == UNMATCHED:
            out.append(text[start:content_start])
            return content_start

        # Outer term first so term order follows opening positions.
        self._register(term)
        content = self.scan_equation(text[content_start:content_end - 1])
        out.append(equation_span(term, content))
        return content_end

    def scan_description(self, text: str) -> str:
        """Rewrite every ``[display]{.term}`` reference in ``text``."""
        out: list[str] = []
        pos = 0
        while (start := text.find("[", pos)) != -1:
            out.append(text[pos:start])
            pos = self._description_reference(text, start, out)
        out.append(text[pos:])
        return "".join(out)

    def _description_reference(self, text: str, start: int, out: list[str]) -> int:
        display_end = text.find("]", start + 1)
        term_start = display_end + 1 + len(REFERENCE_TERM_OPEN)
        if display_end == -1 or text[display_end + 1:term_start] != REFERENCE_TERM_OPEN:
            out.append("[")
            return start + 1

        term_end = text.find("}", term_start)
        display = text[start + 1:display_end]
        term = text[term_start:term_end] if term_end != -1 else ""
        if not display or not term:
            out.append("[")
            return start + 1

        self.description_terms.append(term)
        out.append(description_span(term, display))
        return term_end + 1
