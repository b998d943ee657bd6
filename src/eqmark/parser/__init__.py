"""Parser package."""

from .annotation_parser import AnnotationParser, Mode, parse_content
from .base import ParsedContent, TaggedSpan
from .braces import UNMATCHED, find_matching_brace
from .spans import (
    KEEP_ORIGINAL,
    description_terms,
    iter_tagged_spans,
    strip_tagged_spans,
    transform_description_spans,
    transform_tagged_spans,
)
from .validation import validate_terms

__all__ = [
    "AnnotationParser",
    "KEEP_ORIGINAL",
    "Mode",
    "ParsedContent",
    "TaggedSpan",
    "UNMATCHED",
    "description_terms",
    "find_matching_brace",
    "iter_tagged_spans",
    "parse_content",
    "strip_tagged_spans",
    "transform_description_spans",
    "transform_tagged_spans",
    "validate_terms",
]
