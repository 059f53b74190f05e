"""
Tree rewrites that express conditionals with NOT/AND/OR.

    a → b   becomes   ¬a ∨ b
    a ↔ b   becomes   (¬a ∨ b) ∧ (¬b ∨ a)
    ¬¬a     becomes   a

This is a display aid, not a minimizer: the result is logically
equivalent to the input and no other simplification is attempted.
"""

from __future__ import annotations

from .errors import UnrecognizedStructure
from .expr import Binary, Expr, Unary, Var
from .symbols import OpKind


def _not(e: Expr) -> Expr:
    if isinstance(e, Unary) and e.op is OpKind.NOT:
        return e.operand
    return Unary(OpKind.NOT, e)


def eliminate_conditionals(expr: Expr) -> Expr:
    if isinstance(expr, Var):
        return expr
    if isinstance(expr, Unary):
        return _not(eliminate_conditionals(expr.operand))
    if isinstance(expr, Binary):
        left = eliminate_conditionals(expr.left)
        right = eliminate_conditionals(expr.right)
        if expr.op is OpKind.IMPLIES:
            return Binary(OpKind.OR, _not(left), right)
        if expr.op is OpKind.IFF:
            return Binary(
                OpKind.AND,
                Binary(OpKind.OR, _not(left), right),
                Binary(OpKind.OR, _not(right), left),
            )
        return Binary(expr.op, left, right)
    raise UnrecognizedStructure(f"cannot rewrite node of type {type(expr).__name__}")


__all__ = ["eliminate_conditionals"]
