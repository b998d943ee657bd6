"""Traversal and rewriting of the neutral tagged-span form.

Equation markup carries ``\\htmlClass{term-X}{...}`` wrappers that may nest;
description markup carries flat ``<span class="term-X">...</span>`` wrappers.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Final

from .base import (
    DESCRIPTION_SPAN_CLOSE,
    DESCRIPTION_SPAN_OPEN,
    EQUATION_SPAN_OPEN,
    TERM_CLASS_PREFIX,
    TaggedSpan,
)
from .braces import UNMATCHED, find_matching_brace


class _KeepOriginal:
    __slots__ = ()

    def __repr__(self) -> str:
        return "KEEP_ORIGINAL"


KEEP_ORIGINAL: Final = _KeepOriginal()

Rewrite = Callable[[TaggedSpan], "str | _KeepOriginal"]


def _next_span(markup: str, pos: int) -> tuple[int, int, str, str] | None:
    """Find the next well-formed tagged span at or after ``pos``.

    Returns ``(start, end, term, content)`` with ``end`` just past the closing brace.
    """
    while True:
        start = markup.find(EQUATION_SPAN_OPEN, pos)
        if start == -1:
            return None

        class_start = start + len(EQUATION_SPAN_OPEN)
        class_end = markup.find("}", class_start)
        if class_end == -1 or markup[class_end + 1:class_end + 2] != "{":
            pos = start + 1
            continue

        class_name = markup[class_start:class_end]
        if not class_name.startswith(TERM_CLASS_PREFIX):
            pos = class_end + 1
            continue

        content_start = class_end + 2
        content_end = find_matching_brace(markup, content_start)
        if content_end == UNMATCHED:
            pos = content_start
            continue

        term = class_name[len(TERM_CLASS_PREFIX):]
        return start, content_end, term, markup[content_start:content_end - 1]


def transform_tagged_spans(markup: str, rewrite: Rewrite) -> str:
    """Apply ``rewrite`` to every top-level tagged span of ``markup``.

    Nested spans are part of their parent's ``content``; callers recurse when they
    need them. ``KEEP_ORIGINAL`` copies the matched wrapper through unchanged. The
    span index advances once per match whatever the rewrite returns.
    """
    parts: list[str] = []
    pos = 0
    index = 0
    while (found := _next_span(markup, pos)) is not None:
        start, end, term, content = found
        parts.append(markup[pos:start])
        replacement = rewrite(TaggedSpan(term=term, content=content, index=index))
        index += 1
        parts.append(markup[start:end] if replacement is KEEP_ORIGINAL else replacement)
        pos = end
    parts.append(markup[pos:])
    return "".join(parts)


def iter_tagged_spans(markup: str) -> Iterator[TaggedSpan]:
    pos = 0
    index = 0
    while (found := _next_span(markup, pos)) is not None:
        _, end, term, content = found
        yield TaggedSpan(term=term, content=content, index=index)
        index += 1
        pos = end


def strip_tagged_spans(markup: str) -> str:
    """Remove every wrapper, nested ones included, keeping the wrapped content."""
    return transform_tagged_spans(markup, lambda span: strip_tagged_spans(span.content))


# ---------------------------------------------------------------------------
# Description spans
# ---------------------------------------------------------------------------

def transform_description_spans(
    markup: str,
    on_text: Callable[[str], str],
    on_span: Callable[[str, str], str],
) -> str:
    """Rewrite description markup run by run.

    ``on_text`` receives each maximal run of text outside spans, ``on_span`` the
    term and raw text of each span. Malformed span openings stay part of the text.
    """
    parts: list[str] = []
    text_start = 0
    pos = 0
    while True:
        start = markup.find(DESCRIPTION_SPAN_OPEN, pos)
        if start == -1:
            break

        term_start = start + len(DESCRIPTION_SPAN_OPEN)
        tag_end = markup.find('">', term_start)
        if tag_end == -1:
            break
        term = markup[term_start:tag_end]
        close = markup.find(DESCRIPTION_SPAN_CLOSE, tag_end + 2)
        if close == -1 or '"' in term or ">" in term:
            pos = start + 1
            continue

        if start > text_start:
            parts.append(on_text(markup[text_start:start]))
        parts.append(on_span(term, markup[tag_end + 2:close]))
        pos = text_start = close + len(DESCRIPTION_SPAN_CLOSE)

    if text_start < len(markup):
        parts.append(on_text(markup[text_start:]))
    return "".join(parts)


def description_terms(markup: str) -> list[str]:
    """Terms of every description span, in document order (repeats included)."""
    terms: list[str] = []

    def collect(term: str, text: str) -> str:
        terms.append(term)
        return text

    transform_description_spans(markup, lambda text: text, collect)
    return terms
