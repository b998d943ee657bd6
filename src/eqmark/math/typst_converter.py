"""LaTeX math to Typst math conversion.

Covers the notation that shows up in annotated physics and calculus equations:
greek letters, common operators and arrows, fractions, roots, scripts, accents,
font styles, ``\\text`` and ``\\textcolor``. Unknown commands are emitted by name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from eqmark.parser.braces import UNMATCHED, find_matching_brace

logger = logging.getLogger(__name__)

MathConverter = Callable[[str], str]

_SYMBOLS = {
    # Greek, where LaTeX and Typst disagree
    "epsilon": "epsilon.alt",
    "varepsilon": "epsilon",
    "phi": "phi.alt",
    "varphi": "phi",
    "vartheta": "theta.alt",
    "varrho": "rho.alt",
    "varsigma": "sigma.alt",
    "varpi": "pi.alt",
    "hbar": "planck.reduce",
    "ell": "ell",
    # Operators and relations
    "cdot": "dot.op",
    "times": "times",
    "div": "div",
    "pm": "plus.minus",
    "mp": "minus.plus",
    "le": "<=",
    "leq": "<=",
    "ge": ">=",
    "geq": ">=",
    "ne": "!=",
    "neq": "!=",
    "ll": "<<",
    "gg": ">>",
    "approx": "approx",
    "equiv": "equiv",
    "sim": "tilde.op",
    "simeq": "tilde.eq",
    "propto": "prop",
    "in": "in",
    "notin": "in.not",
    "subset": "subset",
    "subseteq": "subset.eq",
    "cup": "union",
    "cap": "sect",
    "forall": "forall",
    "exists": "exists",
    "circ": "compose",
    "star": "star",
    "ast": "ast",
    "dagger": "dagger",
    "otimes": "times.circle",
    "oplus": "plus.circle",
    "wedge": "and",
    "vee": "or",
    "neg": "not",
    # Calculus and big operators
    "infty": "infinity",
    "partial": "diff",
    "nabla": "nabla",
    "sum": "sum",
    "prod": "product",
    "int": "integral",
    "iint": "integral.double",
    "iiint": "integral.triple",
    "oint": "integral.cont",
    "prime": "prime",
    "emptyset": "emptyset",
    # Arrows
    "to": "arrow.r",
    "rightarrow": "arrow.r",
    "leftarrow": "arrow.l",
    "gets": "arrow.l",
    "leftrightarrow": "arrow.l.r",
    "Rightarrow": "arrow.r.double",
    "Leftarrow": "arrow.l.double",
    "Leftrightarrow": "arrow.l.r.double",
    "implies": "arrow.r.double.long",
    "iff": "arrow.l.r.double.long",
    "mapsto": "arrow.r.bar",
    # Delimiters and dots
    "langle": "angle.l",
    "rangle": "angle.r",
    "lvert": "|",
    "rvert": "|",
    "vert": "|",
    "mid": "|",
    "lVert": "||",
    "rVert": "||",
    "Vert": "||",
    "lfloor": "floor.l",
    "rfloor": "floor.r",
    "lceil": "ceil.l",
    "rceil": "ceil.r",
    "ldots": "dots",
    "dots": "dots",
    "cdots": "dots.c",
    "vdots": "dots.v",
    "ddots": "dots.down",
    # Spacing
    "quad": "quad",
    "qquad": "wide",
}

# Single-character commands such as ``\,`` or ``\{``.
_CHAR_SYMBOLS = {
    ",": "thin",
    ":": "med",
    ";": "med",
    " ": "thin",
    "!": "",
    "{": "{",
    "}": "}",
    "|": "||",
    "\\": "\\",
    "%": "%",
    "&": "&",
    "#": "\\#",
    "$": "\\$",
    "_": "\\_",
}

# One-argument commands that map onto a Typst function.
_FUNCTIONS = {
    "vec": "arrow",
    "hat": "hat",
    "widehat": "hat",
    "bar": "overline",
    "overline": "overline",
    "underline": "underline",
    "tilde": "tilde",
    "widetilde": "tilde",
    "dot": "dot",
    "ddot": "dot.double",
    "mathbf": "bold",
    "boldsymbol": "bold",
    "bm": "bold",
    "mathrm": "upright",
    "mathit": "italic",
    "mathcal": "cal",
    "mathbb": "bb",
    "mathfrak": "frak",
    "mathsf": "sans",
    "mathtt": "mono",
    "abs": "abs",
    "norm": "norm",
}

_TEXT_COMMANDS = {"text", "textrm", "textit", "textbf", "mbox"}
_FRACTIONS = {"frac", "dfrac", "tfrac", "cfrac"}
_IGNORED = {"left", "right", "big", "Big", "bigg", "Bigg", "displaystyle", "textstyle", "limits", "nolimits"}

_SIMPLE_RE = re.compile(r'^(?:[\w.]+|"[^"]*")$')


def convert_math_notation(latex: str) -> str:
    """Convert LaTeX math source into Typst math markup."""
    return _Converter(latex).convert()


def _wrap(expr: str) -> str:
    return expr if _SIMPLE_RE.match(expr) else f"({expr})"


def _typst_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _color_expr(color: str) -> str:
    color = color.strip()
    return f'rgb("{color}")' if color.startswith("#") else color


class _Converter:
    """Recursive-descent conversion over a cursor into the source string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def convert(self) -> str:
        items: list[str] = []
        while self.pos < len(self.source):
            self._step(items)
        return " ".join(item for item in items if item)

    # -- cursor helpers ----------------------------------------------------

    def _skip_spaces(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1

    def _read_group_raw(self) -> str | None:
        """Consume ``{...}`` at the cursor and return its inner text."""
        self._skip_spaces()
        if self.pos >= len(self.source) or self.source[self.pos] != "{":
            return None
        end = find_matching_brace(self.source, self.pos + 1)
        if end == UNMATCHED:
            return None
        inner = self.source[self.pos + 1:end - 1]
        self.pos = end
        return inner

    def _read_optional_raw(self) -> str | None:
        self._skip_spaces()
        if self.pos >= len(self.source) or self.source[self.pos] != "[":
            return None
        end = find_matching_brace(self.source, self.pos + 1, "[", "]")
        if end == UNMATCHED:
            return None
        inner = self.source[self.pos + 1:end - 1]
        self.pos = end
        return inner

    def _read_argument(self) -> str:
        """Convert the next argument: a brace group, one command or one character."""
        raw = self._read_group_raw()
        if raw is not None:
            return _Converter(raw).convert()
        self._skip_spaces()
        if self.pos >= len(self.source):
            return ""
        if self.source[self.pos] != "\\":
            char = self.source[self.pos]
            self.pos += 1
            return _Converter(char).convert()
        items: list[str] = []
        self._step(items)
        return " ".join(item for item in items if item)

    # -- conversion --------------------------------------------------------

    def _step(self, items: list[str]) -> None:
        char = self.source[self.pos]

        if char.isspace():
            self.pos += 1
        elif char == "\\":
            self._command(items)
        elif char == "{":
            raw = self._read_group_raw()
            if raw is None:
                self.pos += 1
                items.append("{")
            else:
                group = _Converter(raw).convert()
                # A script after the group applies to all of it.
                self._skip_spaces()
                if group and self.source[self.pos:self.pos + 1] in ("^", "_", "'"):
                    group = _wrap(group)
                items.append(group)
        elif char in "^_":
            self.pos += 1
            script = _wrap(self._read_argument())
            if items:
                items[-1] += char + script
            else:
                items.append(f'""{char}{script}')
        elif char == "'":
            self.pos += 1
            if items:
                items[-1] += "'"
            else:
                items.append("'")
        elif char.isdigit():
            match = re.match(r"\d+(?:\.\d+)?", self.source[self.pos:])
            items.append(match.group(0))
            self.pos += len(match.group(0))
        elif char == '"':
            self.pos += 1
            items.append('\\"')
        elif char in "#$":
            self.pos += 1
            items.append("\\" + char)
        else:
            self.pos += 1
            items.append(char)

    def _command(self, items: list[str]) -> None:
        match = re.match(r"\\([a-zA-Z]+)\*?", self.source[self.pos:])
        if match is None:
            symbol = self.source[self.pos + 1:self.pos + 2]
            self.pos += 2
            items.append(_CHAR_SYMBOLS.get(symbol, symbol))
            return

        name = match.group(1)
        self.pos += len(match.group(0))

        if name in _IGNORED:
            self._skip_spaces()
            if name in {"left", "right"} and self.source[self.pos:self.pos + 1] == ".":
                self.pos += 1
            return

        if name in _FRACTIONS:
            numerator = self._read_argument()
            denominator = self._read_argument()
            items.append(f"{_wrap(numerator)}/{_wrap(denominator)}")
        elif name == "binom":
            top = self._read_argument()
            bottom = self._read_argument()
            items.append(f"binom({top}, {bottom})")
        elif name == "sqrt":
            degree = self._read_optional_raw()
            radicand = self._read_argument()
            if degree is None:
                items.append(f"sqrt({radicand})")
            else:
                items.append(f"root({_Converter(degree).convert()}, {radicand})")
        elif name in _TEXT_COMMANDS:
            raw = self._read_group_raw()
            items.append(_typst_string(raw if raw is not None else ""))
        elif name == "operatorname":
            raw = self._read_group_raw()
            items.append(f"op({_typst_string(raw or '')})")
        elif name == "textcolor":
            color = self._read_group_raw() or ""
            body = self._read_argument()
            items.append(f"#text(fill: {_color_expr(color)})[${body}$]")
        elif name == "color":
            # Colors the rest of the current group.
            color = self._read_group_raw() or ""
            rest = _Converter(self.source[self.pos:]).convert()
            self.pos = len(self.source)
            items.append(f"#text(fill: {_color_expr(color)})[${rest}$]")
        elif name == "htmlClass":
            self._read_group_raw()
            items.append(self._read_argument())
        elif name in _FUNCTIONS:
            items.append(f"{_FUNCTIONS[name]}({self._read_argument()})")
        elif name in _SYMBOLS:
            items.append(_SYMBOLS[name])
        else:
            # Greek letters and function names (sin, log, alpha, Omega) share names.
            items.append(name)
