"""Pieces shared by every renderer: template environments and definition filtering."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from eqmark.parser.base import ParsedContent

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "template"
UNTITLED = "Untitled"


def make_environment(template_dir: Path | None = None, *, latex: bool = False) -> Environment:
    """Build a Jinja2 environment over ``template_dir``.

    LaTeX templates swap the delimiters for ``<< >>`` / ``<% %>`` / ``<# #>`` so braces
    and ``%`` comments in the template body stay literal.
    """
    loader = FileSystemLoader(str(template_dir or TEMPLATE_DIR))
    options: dict[str, object] = {
        "loader": loader,
        "trim_blocks": True,
        "lstrip_blocks": True,
        "keep_trailing_newline": True,
        "undefined": StrictUndefined,
    }
    if latex:
        options.update(
            block_start_string="<%",
            block_end_string="%>",
            variable_start_string="<<",
            variable_end_string=">>",
            comment_start_string="<#",
            comment_end_string="#>",
            autoescape=False,
        )
    else:
        options["autoescape"] = select_autoescape(["html"])
    return Environment(**options)


def document_title(content: ParsedContent) -> str:
    return content.title or UNTITLED


def exported_definitions(content: ParsedContent, format_name: str) -> list[tuple[str, str]]:
    """Definitions in document order, minus those whose term the equation never marks."""
    kept: list[tuple[str, str]] = []
    known = set(content.term_order)
    for term, body in content.definitions.items():
        if term in known:
            kept.append((term, body))
        else:
            logger.warning("Skipping definition %r in %s export: term is not marked in the equation", term, format_name)
    return kept
