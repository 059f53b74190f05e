"""
Expression tree for propositional formulas.

Three node shapes: ``Var`` leaves, ``Unary`` (negation) and ``Binary``
connectives. Nodes are immutable and each one is owned by exactly one
parent; variables are referenced by name only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Union

from .symbols import OpKind, spec_for


@dataclass(frozen=True, slots=True)
class Var:
    """Reference to a declared variable."""
    name: str

    def atoms(self) -> FrozenSet[str]:
        return frozenset({self.name})

    def depth(self) -> int:
        return 0

    def to_text(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "var", "name": self.name}


@dataclass(frozen=True, slots=True)
class Unary:
    """Negation. ``op`` is always ``OpKind.NOT``."""
    op: OpKind
    operand: "Expr"

    def __post_init__(self):
        if spec_for(self.op).arity != 1:
            raise ValueError(f"{self.op.value} is not a unary connective")

    def atoms(self) -> FrozenSet[str]:
        return self.operand.atoms()

    def depth(self) -> int:
        return 1 + self.operand.depth()

    def to_text(self) -> str:
        inner = self.operand.to_text()
        if isinstance(self.operand, Binary):
            inner = f"({inner})"
        return f"{spec_for(self.op).symbol}{inner}"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "unary", "op": self.op.value, "operand": self.operand.to_dict()}


@dataclass(frozen=True, slots=True)
class Binary:
    """Binary connective."""
    op: OpKind
    left: "Expr"
    right: "Expr"

    def __post_init__(self):
        if spec_for(self.op).arity != 2:
            raise ValueError(f"{self.op.value} is not a binary connective")

    def atoms(self) -> FrozenSet[str]:
        return self.left.atoms() | self.right.atoms()

    def depth(self) -> int:
        return 1 + max(self.left.depth(), self.right.depth())

    def to_text(self) -> str:
        left = self.left.to_text()
        right = self.right.to_text()
        # Wrap compound operands so the rendering never depends on precedence.
        if isinstance(self.left, Binary):
            left = f"({left})"
        if isinstance(self.right, Binary):
            right = f"({right})"
        return f"{left}{spec_for(self.op).symbol}{right}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "binary",
            "op": self.op.value,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }


Expr = Union[Var, Unary, Binary]


# Convenience constructors, mostly for building trees by hand in tests.

def var(name: str) -> Var:
    return Var(name)


def neg(operand: Expr) -> Unary:
    return Unary(OpKind.NOT, operand)


def conj(left: Expr, right: Expr) -> Binary:
    return Binary(OpKind.AND, left, right)


def disj(left: Expr, right: Expr) -> Binary:
    return Binary(OpKind.OR, left, right)


def xor(left: Expr, right: Expr) -> Binary:
    return Binary(OpKind.XOR, left, right)


def implies(left: Expr, right: Expr) -> Binary:
    return Binary(OpKind.IMPLIES, left, right)


def iff(left: Expr, right: Expr) -> Binary:
    return Binary(OpKind.IFF, left, right)


__all__ = [
    "Var",
    "Unary",
    "Binary",
    "Expr",
    "var",
    "neg",
    "conj",
    "disj",
    "xor",
    "implies",
    "iff",
]
