"""Math renderers for HTML output."""

from __future__ import annotations

import html
from typing import Protocol


class MathRenderer(Protocol):
    def render(self, latex: str, *, display: bool) -> str:  # pragma: no cover - structural protocol
        """Return HTML markup for ``latex``."""


class KaTeXMarkupRenderer:
    """Emit escaped TeX that the exported page typesets with KaTeX on load.

    The page script runs KaTeX with ``trust`` enabled so ``\\htmlClass`` survives
    as a CSS class on the rendered node.
    """

    def render(self, latex: str, *, display: bool) -> str:
        kind = "math-display" if display else "math-inline"
        return f'<span class="math {kind}">{html.escape(latex, quote=False)}</span>'
