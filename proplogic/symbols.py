"""
Operator table and symbol normalization.

The canonical alphabet is ``¬ ∧ ∨ → ↔ △`` plus ``(`` and ``)``. Front ends
accept a handful of ASCII and typographic spellings; ``normalize_symbols``
rewrites them in a single left-to-right pass, longest alias first, so that
``<->`` is never read as ``<`` followed by ``->``.

Characters outside the alias table are left untouched. Rejecting them is
the tokenizer's job, which keeps error positions in one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping


class OpKind(Enum):
    """Logical connectives."""
    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    IMPLIES = "IMPLIES"
    IFF = "IFF"


class Assoc(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class OperatorSpec:
    """Static description of one connective."""
    kind: OpKind
    symbol: str
    arity: int
    precedence: int
    assoc: Assoc
    fn: Callable[..., bool]

    @property
    def left_assoc(self) -> bool:
        return self.assoc is Assoc.LEFT


NOT_SYMBOL = "¬"
AND_SYMBOL = "∧"
OR_SYMBOL = "∨"
XOR_SYMBOL = "△"
IMPLIES_SYMBOL = "→"
IFF_SYMBOL = "↔"
LPAREN = "("
RPAREN = ")"

_SPECS = (
    OperatorSpec(OpKind.NOT, NOT_SYMBOL, 1, 4, Assoc.RIGHT, lambda a: not a),
    OperatorSpec(OpKind.AND, AND_SYMBOL, 2, 3, Assoc.LEFT, lambda a, b: a and b),
    OperatorSpec(OpKind.OR, OR_SYMBOL, 2, 2, Assoc.LEFT, lambda a, b: a or b),
    OperatorSpec(OpKind.XOR, XOR_SYMBOL, 2, 2, Assoc.LEFT, lambda a, b: a != b),
    OperatorSpec(OpKind.IMPLIES, IMPLIES_SYMBOL, 2, 1, Assoc.RIGHT, lambda a, b: (not a) or b),
    OperatorSpec(OpKind.IFF, IFF_SYMBOL, 2, 1, Assoc.LEFT, lambda a, b: a == b),
)

# Read-only, process-wide.
OPERATORS: Mapping[str, OperatorSpec] = MappingProxyType({s.symbol: s for s in _SPECS})
OPERATORS_BY_KIND: Mapping[OpKind, OperatorSpec] = MappingProxyType({s.kind: s for s in _SPECS})


def spec_for(kind: OpKind) -> OperatorSpec:
    return OPERATORS_BY_KIND[kind]


# ---------------------------------------------------------------------------
# Alias table
# ---------------------------------------------------------------------------

_SYMBOL_MAP = {
    # negation
    "~": NOT_SYMBOL, "!": NOT_SYMBOL, "￢": NOT_SYMBOL,
    # conjunction
    "·": AND_SYMBOL, "*": AND_SYMBOL, "×": AND_SYMBOL, "&&": AND_SYMBOL, "&": AND_SYMBOL,
    # disjunction
    "+": OR_SYMBOL, "||": OR_SYMBOL, "|": OR_SYMBOL,
    # exclusive or
    "⊕": XOR_SYMBOL, "^": XOR_SYMBOL,
    # implications / equivalences
    "->": IMPLIES_SYMBOL, "=>": IMPLIES_SYMBOL, "⇒": IMPLIES_SYMBOL,
    "<->": IFF_SYMBOL, "<=>": IFF_SYMBOL, "⇔": IFF_SYMBOL,
    # braces count as parentheses
    "{": LPAREN, "}": RPAREN,
}

SYMBOL_ALIASES: Mapping[str, str] = MappingProxyType(dict(_SYMBOL_MAP))

_ALIAS_RE = re.compile(
    "|".join(re.escape(alias) for alias in sorted(_SYMBOL_MAP, key=len, reverse=True))
)


def normalize_symbols(s: str) -> str:
    """Rewrite every recognized alias to its canonical operator symbol."""
    if not s:
        return ""
    return _ALIAS_RE.sub(lambda m: _SYMBOL_MAP[m.group(0)], s)


def is_canonical_operator(ch: str) -> bool:
    return ch in OPERATORS


__all__ = [
    "OpKind",
    "Assoc",
    "OperatorSpec",
    "OPERATORS",
    "OPERATORS_BY_KIND",
    "SYMBOL_ALIASES",
    "NOT_SYMBOL",
    "AND_SYMBOL",
    "OR_SYMBOL",
    "XOR_SYMBOL",
    "IMPLIES_SYMBOL",
    "IFF_SYMBOL",
    "LPAREN",
    "RPAREN",
    "spec_for",
    "normalize_symbols",
    "is_canonical_operator",
]
