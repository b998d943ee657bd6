"""Tests for tagged-span traversal in equation and description markup."""

from __future__ import annotations

from eqmark.parser.base import TaggedSpan
from eqmark.parser.spans import (
    KEEP_ORIGINAL,
    description_terms,
    iter_tagged_spans,
    strip_tagged_spans,
    transform_description_spans,
    transform_tagged_spans,
)

MARKUP = r"\htmlClass{term-a}{E} = \htmlClass{term-b}{m}\htmlClass{term-c}{\frac{1}{2}}^2"


def test_rewrite_receives_term_content_and_index() -> None:
    seen: list[TaggedSpan] = []

    def record(span: TaggedSpan) -> str:
        seen.append(span)
        return f"<{span.term}:{span.content}>"

    result = transform_tagged_spans(MARKUP, record)
    assert result == r"<a:E> = <b:m><c:\frac{1}{2}>^2"
    assert [(s.term, s.index) for s in seen] == [("a", 0), ("b", 1), ("c", 2)]


def test_keep_original_copies_wrapper_and_still_counts() -> None:
    def only_b(span: TaggedSpan) -> object:
        return "B" if span.term == "b" else KEEP_ORIGINAL

    indices: list[int] = []

    def tracking(span: TaggedSpan) -> object:
        indices.append(span.index)
        return only_b(span)

    result = transform_tagged_spans(MARKUP, tracking)  # type: ignore[arg-type]
    assert result == r"\htmlClass{term-a}{E} = B\htmlClass{term-c}{\frac{1}{2}}^2"
    assert indices == [0, 1, 2]


def test_non_term_classes_pass_through() -> None:
    markup = r"\htmlClass{other}{x} + \htmlClass{term-y}{y}"
    assert transform_tagged_spans(markup, lambda span: span.content) == r"\htmlClass{other}{x} + y"


def test_unmatched_content_passes_through() -> None:
    markup = r"\htmlClass{term-x}{\frac{a}{b}"
    assert transform_tagged_spans(markup, lambda span: "X") == markup


def test_nested_spans_are_reached_by_recursion() -> None:
    markup = r"\htmlClass{term-outer}{1 + \htmlClass{term-inner}{x}}"
    spans = list(iter_tagged_spans(markup))
    assert [s.term for s in spans] == ["outer"]
    assert spans[0].content == r"1 + \htmlClass{term-inner}{x}"
    assert strip_tagged_spans(markup) == "1 + x"


def test_description_spans() -> None:
    markup = 'The <span class="term-a">energy</span> of <span class="term-b">mass</span> $m$.'
    result = transform_description_spans(markup, str.upper, lambda term, text: f"[{term}:{text}]")
    assert result == "THE [a:energy] OF [b:mass] $M$."
    assert description_terms(markup) == ["a", "b"]


def test_description_text_runs_are_whole() -> None:
    runs: list[str] = []

    def collect(text: str) -> str:
        runs.append(text)
        return text

    transform_description_spans('x $a + b$ y <span class="term-a">t</span> z', collect, lambda term, text: text)
    assert runs == ["x $a + b$ y ", " z"]


def test_malformed_description_span_is_text() -> None:
    markup = '<span class="term-a">never closed'
    assert transform_description_spans(markup, lambda text: text.replace("<", "&lt;"), lambda t, x: "!") == (
        '&lt;span class="term-a">never closed'
    )
