"""
Structured failures raised by the expression engine.

Every stage fails fast with the first problem it finds. Errors carry a
kind, a message, and where available the offending token and its position
in the normalized expression, so a front end can report them verbatim.
None of them are retryable: the engine is a pure function of its input.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Failure categories reported at the engine boundary."""
    EMPTY_EXPRESSION = "EmptyExpression"
    NO_VARIABLES_DECLARED = "NoVariablesDeclared"
    TOO_MANY_VARIABLES = "TooManyVariables"
    DUPLICATE_VARIABLE = "DuplicateVariable"
    INVALID_VARIABLE_NAME = "InvalidVariableName"
    UNBALANCED_PARENTHESES = "UnbalancedParentheses"
    INVALID_CHARACTER = "InvalidCharacter"
    UNKNOWN_VARIABLE = "UnknownVariable"
    UNBOUND_VARIABLE = "UnboundVariable"
    MALFORMED_EXPRESSION = "MalformedExpression"
    UNRECOGNIZED_STRUCTURE = "UnrecognizedStructure"


class EngineError(Exception):
    """Base class for every engine failure."""

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.message = message
        self.token = token
        self.position = position
        super().__init__(f"[{self.kind.value}] {message}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "token": self.token,
            "position": self.position,
        }


class EmptyExpression(EngineError):
    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self):
        super().__init__("expression is empty")


class NoVariablesDeclared(EngineError):
    kind = ErrorKind.NO_VARIABLES_DECLARED

    def __init__(self):
        super().__init__("at least one variable must be declared")


class TooManyVariables(EngineError):
    """Raised before enumeration when 2^n rows would exceed the configured ceiling."""
    kind = ErrorKind.TOO_MANY_VARIABLES

    def __init__(self, count: int, maximum: int):
        self.count = count
        self.maximum = maximum
        super().__init__(f"{count} variables declared, the maximum is {maximum}")


class DuplicateVariable(EngineError):
    kind = ErrorKind.DUPLICATE_VARIABLE

    def __init__(self, name: str, within: Optional[str] = None):
        if within is None:
            message = f"variable declared more than once: {name}"
        else:
            message = f"variable {name} is also a letter of declared variable {within}"
        super().__init__(message, token=name)


class InvalidVariableName(EngineError):
    kind = ErrorKind.INVALID_VARIABLE_NAME

    def __init__(self, name: str):
        super().__init__(f"variable names must consist of letters only: {name!r}", token=name)


class UnbalancedParentheses(EngineError):
    kind = ErrorKind.UNBALANCED_PARENTHESES

    def __init__(self, position: Optional[int] = None):
        super().__init__("unbalanced parentheses or braces in expression", position=position)


class InvalidCharacter(EngineError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: int):
        super().__init__(
            f"invalid character {char!r} at position {position}",
            token=char,
            position=position,
        )


class UnknownVariable(EngineError):
    kind = ErrorKind.UNKNOWN_VARIABLE

    def __init__(self, name: str, position: Optional[int] = None):
        super().__init__(f"undeclared variable: {name}", token=name, position=position)


class UnboundVariable(EngineError):
    """Evaluation reached a variable missing from the assignment."""
    kind = ErrorKind.UNBOUND_VARIABLE

    def __init__(self, name: str):
        super().__init__(f"no value assigned to variable: {name}", token=name)


class MalformedExpression(EngineError):
    kind = ErrorKind.MALFORMED_EXPRESSION


class UnrecognizedStructure(EngineError):
    kind = ErrorKind.UNRECOGNIZED_STRUCTURE


class ConfigError(Exception):
    """Raised when an engine configuration file is missing or malformed."""
    pass
