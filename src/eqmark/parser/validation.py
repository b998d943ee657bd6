"""Cross-reference checks between the equation, description and definitions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def validate_terms(
    term_order: Sequence[str],
    description_terms: Iterable[str],
    definition_keys: Iterable[str],
) -> tuple[list[str], list[str]]:
    """Return ``(errors, warnings)`` for the three term sets.

    Only set membership matters: where a description reference sits relative to the
    equation block in the file does not affect validity.
    """
    equation_terms = set(term_order)
    described = _unique(description_terms)
    defined = _unique(definition_keys)
    described_set = set(described)
    defined_set = set(defined)

    errors: list[str] = []
    warnings: list[str] = []

    for term in described:
        if term not in equation_terms:
            errors.append(
                f'Term "{term}" is referenced in the description ([...]{{.{term}}}) '
                f"but never marked in the equation (\\mark[{term}]{{...}})"
            )

    for term in term_order:
        if term not in defined_set:
            errors.append(
                f'Term "{term}" is marked in the equation (\\mark[{term}]{{...}}) '
                f"but has no definition (## .{term})"
            )

    for term in term_order:
        if term not in described_set:
            warnings.append(
                f'Term "{term}" is marked in the equation (\\mark[{term}]{{...}}) '
                f"but never referenced in the description ([...]{{.{term}}})"
            )

    for term in defined:
        if term not in equation_terms:
            warnings.append(
                f'Definition "## .{term}" does not correspond to any term marked '
                f"in the equation (\\mark[{term}]{{...}})"
            )

    return errors, warnings
