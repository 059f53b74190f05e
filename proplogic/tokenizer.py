"""
Tokenizer for normalized propositional expressions.

A maximal run of letters is one variable token and must name a declared
variable. Each canonical operator and each parenthesis is a single-character
token. Whitespace separates tokens and is otherwise ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional

from .errors import InvalidCharacter, UnbalancedParentheses, UnknownVariable
from .symbols import LPAREN, OPERATORS, RPAREN


class TokenKind(Enum):
    VARIABLE = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: str
    pos: int

    def to_dict(self) -> dict:
        return {"kind": self.kind.name, "value": self.value, "pos": self.pos}


_OPEN = {"(", "{"}
_CLOSE = {")", "}"}


def find_unbalanced(s: str) -> Optional[int]:
    """
    Return the position of the first parenthesis that breaks balance, or None.

    A closing bracket with nothing open reports its own position; an opening
    bracket left unclosed reports the position of the earliest one.
    """
    open_positions: List[int] = []
    for i, ch in enumerate(s):
        if ch in _OPEN:
            open_positions.append(i)
        elif ch in _CLOSE:
            if not open_positions:
                return i
            open_positions.pop()
    if open_positions:
        return open_positions[0]
    return None


def check_balanced(s: str) -> None:
    pos = find_unbalanced(s)
    if pos is not None:
        raise UnbalancedParentheses(position=pos)


def tokenize(s: str, variables: Iterable[str]) -> List[Token]:
    """
    Tokenize a normalized expression against the declared variable set.

    Raises:
        UnbalancedParentheses: before any scanning, if brackets do not pair up.
        UnknownVariable: for a letter run that is not a declared name.
        InvalidCharacter: for anything outside the variable/operator alphabet.
    """
    check_balanced(s)
    declared = set(variables)
    tokens: List[Token] = []
    pos = 0
    n = len(s)
    while pos < n:
        ch = s[pos]
        if ch.isspace():
            pos += 1
            continue
        if ch.isalpha():
            start = pos
            while pos < n and s[pos].isalpha():
                pos += 1
            name = s[start:pos]
            if name not in declared:
                raise UnknownVariable(name, position=start)
            tokens.append(Token(TokenKind.VARIABLE, name, start))
            continue
        if ch in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, ch, pos))
        elif ch == LPAREN:
            tokens.append(Token(TokenKind.LPAREN, ch, pos))
        elif ch == RPAREN:
            tokens.append(Token(TokenKind.RPAREN, ch, pos))
        else:
            raise InvalidCharacter(ch, pos)
        pos += 1
    return tokens
