"""
Operator-precedence parser (shunting-yard).

Tokens are first reordered into postfix using the precedence and
associativity in ``symbols.OPERATORS``; the tree is then assembled from
postfix with an operand stack, which is where operator arity is checked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .errors import EmptyExpression, MalformedExpression, UnbalancedParentheses
from .expr import Binary, Expr, Unary, Var
from .symbols import OPERATORS, normalize_symbols
from .tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


def _misplaced(tok: Token, expected: str) -> MalformedExpression:
    return MalformedExpression(
        f"expected {expected} at position {tok.pos}, found {tok.value!r}",
        token=tok.value,
        position=tok.pos,
    )


def to_postfix(tokens: Sequence[Token]) -> List[Token]:
    """
    Reorder infix tokens into postfix; parentheses are consumed.

    Tokens must alternate properly: a variable, ``¬`` or ``(`` where an
    operand is due, a binary operator or ``)`` after an operand.
    """
    output: List[Token] = []
    stack: List[Token] = []
    expect_operand = True

    for tok in tokens:
        if tok.kind is TokenKind.VARIABLE:
            if not expect_operand:
                raise _misplaced(tok, "an operator")
            output.append(tok)
            expect_operand = False
        elif tok.kind is TokenKind.OPERATOR:
            op = OPERATORS[tok.value]
            if op.arity == 1 and not expect_operand:
                raise _misplaced(tok, "an operator")
            if op.arity == 2 and expect_operand:
                raise _misplaced(tok, "an operand")
            while stack and stack[-1].kind is TokenKind.OPERATOR:
                top = OPERATORS[stack[-1].value]
                if top.precedence > op.precedence or (
                    top.precedence == op.precedence and op.left_assoc
                ):
                    output.append(stack.pop())
                else:
                    break
            stack.append(tok)
            expect_operand = True
        elif tok.kind is TokenKind.LPAREN:
            if not expect_operand:
                raise _misplaced(tok, "an operator")
            stack.append(tok)
        elif tok.kind is TokenKind.RPAREN:
            if expect_operand:
                raise _misplaced(tok, "an operand")
            while stack and stack[-1].kind is not TokenKind.LPAREN:
                output.append(stack.pop())
            if not stack:
                raise UnbalancedParentheses(position=tok.pos)
            stack.pop()

    if expect_operand:
        if tokens:
            last = tokens[-1]
            raise MalformedExpression(
                f"expression ends with {last.value!r} at position {last.pos}; an operand is missing",
                token=last.value,
                position=last.pos,
            )
        raise MalformedExpression("expression has no operands")

    while stack:
        tok = stack.pop()
        if tok.kind is TokenKind.LPAREN:
            raise UnbalancedParentheses(position=tok.pos)
        output.append(tok)

    return output


def build_ast(postfix: Sequence[Token]) -> Expr:
    """Assemble an expression tree from postfix tokens."""
    stack: List[Expr] = []
    for tok in postfix:
        if tok.kind is TokenKind.VARIABLE:
            stack.append(Var(tok.value))
            continue
        if tok.kind is not TokenKind.OPERATOR:
            raise MalformedExpression(
                f"unexpected {tok.kind.name} in postfix sequence", token=tok.value, position=tok.pos
            )
        op = OPERATORS[tok.value]
        if len(stack) < op.arity:
            raise MalformedExpression(
                f"operator {tok.value!r} at position {tok.pos} is missing an operand",
                token=tok.value,
                position=tok.pos,
            )
        if op.arity == 1:
            stack.append(Unary(op.kind, stack.pop()))
        else:
            right = stack.pop()
            left = stack.pop()
            stack.append(Binary(op.kind, left, right))

    if len(stack) != 1:
        if not stack:
            raise MalformedExpression("expression has no operands")
        raise MalformedExpression(
            f"expression does not reduce to a single value ({len(stack)} operands left without an operator)"
        )
    return stack[0]


@dataclass(frozen=True)
class ParsedExpression:
    """Everything the front half of the pipeline produces for one string."""
    source: str
    normalized: str
    tokens: Tuple[Token, ...]
    postfix: Tuple[Token, ...]
    ast: Expr


def parse(source: str, variables: Iterable[str]) -> ParsedExpression:
    """
    Normalize, tokenize and parse ``source`` against the declared variables.

    Raises:
        EmptyExpression: if ``source`` has nothing but whitespace.
        EngineError: the first tokenizer or parser failure.
    """
    if not source or not source.strip():
        raise EmptyExpression()
    normalized = normalize_symbols(source)
    tokens = tokenize(normalized, variables)
    postfix = to_postfix(tokens)
    logger.debug("postfix for %r: %s", source, " ".join(t.value for t in postfix))
    ast = build_ast(postfix)
    return ParsedExpression(
        source=source,
        normalized=normalized,
        tokens=tuple(tokens),
        postfix=tuple(postfix),
        ast=ast,
    )


__all__ = ["ParsedExpression", "to_postfix", "build_ast", "parse"]
