"""
Variable-set validation and canonical assignment enumeration.

Row ``r`` of ``n`` variables gives variable ``i`` the value True iff bit
``n-1-i`` of ``r`` is 0, so the first declared variable changes slowest
and the table runs from all-true down to all-false. This order is part of
the output contract.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import DuplicateVariable, InvalidVariableName, NoVariablesDeclared, TooManyVariables

DEFAULT_MAX_VARIABLES = 6


def validate_variables(variables: Sequence[str], max_variables: int = DEFAULT_MAX_VARIABLES) -> Tuple[str, ...]:
    """
    Check the declared variable list and return it as a tuple.

    A single-letter name may not also occur inside another declared name
    (``p`` next to ``pq``). The ceiling is checked last, but always before
    any row is generated.
    """
    if not variables:
        raise NoVariablesDeclared()
    seen = set()
    for name in variables:
        if not name or not name.isalpha():
            raise InvalidVariableName(name)
        if name in seen:
            raise DuplicateVariable(name)
        seen.add(name)
    for name in variables:
        if len(name) != 1:
            continue
        for other in variables:
            if other != name and name in other:
                raise DuplicateVariable(name, within=other)
    if len(variables) > max_variables:
        raise TooManyVariables(len(variables), max_variables)
    return tuple(variables)


def parse_variable_list(text: str) -> List[str]:
    """Split a comma separated declaration such as ``"p, q, r"``."""
    return [v.strip() for v in text.split(",") if v.strip()]


def row_values(index: int, count: int) -> Tuple[bool, ...]:
    return tuple(not ((index >> (count - 1 - i)) & 1) for i in range(count))


def iter_assignments(variables: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield the ``2^n`` assignments in canonical order."""
    n = len(variables)
    for index in range(1 << n):
        yield dict(zip(variables, row_values(index, n)))


def enumerate_assignments(
    variables: Sequence[str], max_variables: int = DEFAULT_MAX_VARIABLES
) -> List[Dict[str, bool]]:
    names = validate_variables(variables, max_variables)
    return list(iter_assignments(names))


__all__ = [
    "DEFAULT_MAX_VARIABLES",
    "validate_variables",
    "parse_variable_list",
    "row_values",
    "iter_assignments",
    "enumerate_assignments",
]
