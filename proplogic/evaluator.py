"""
Evaluation of expression trees and postfix sequences under an assignment.

Both paths are pure and use the same truth functions from the operator
table, so they agree on every input.
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from .errors import MalformedExpression, UnboundVariable, UnrecognizedStructure
from .expr import Binary, Expr, Unary, Var
from .symbols import OPERATORS, spec_for
from .tokenizer import Token, TokenKind


def evaluate(expr: Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate ``expr`` by structural recursion."""
    if isinstance(expr, Var):
        try:
            return assignment[expr.name]
        except KeyError:
            raise UnboundVariable(expr.name) from None
    if isinstance(expr, Unary):
        return spec_for(expr.op).fn(evaluate(expr.operand, assignment))
    if isinstance(expr, Binary):
        fn = spec_for(expr.op).fn
        return fn(evaluate(expr.left, assignment), evaluate(expr.right, assignment))
    raise UnrecognizedStructure(f"cannot evaluate node of type {type(expr).__name__}")


def evaluate_postfix(postfix: Sequence[Token], assignment: Mapping[str, bool]) -> bool:
    """Evaluate a postfix token sequence with an operand stack."""
    stack: List[bool] = []
    for tok in postfix:
        if tok.kind is TokenKind.VARIABLE:
            if tok.value not in assignment:
                raise UnboundVariable(tok.value)
            stack.append(assignment[tok.value])
            continue
        op = OPERATORS.get(tok.value)
        if op is None or len(stack) < op.arity:
            raise MalformedExpression(
                f"cannot apply {tok.value!r} at position {tok.pos}", token=tok.value, position=tok.pos
            )
        if op.arity == 1:
            stack.append(op.fn(stack.pop()))
        else:
            b = stack.pop()
            a = stack.pop()
            stack.append(op.fn(a, b))
    if len(stack) != 1:
        raise MalformedExpression("postfix sequence does not reduce to a single value")
    return stack[0]


__all__ = ["evaluate", "evaluate_postfix"]
