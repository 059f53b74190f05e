"""Tautology / contradiction / contingency classification of a result column."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Classification(Enum):
    TAUTOLOGY = "Tautology"
    CONTRADICTION = "Contradiction"
    CONTINGENCY = "Contingency"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Classification.TAUTOLOGY: "Tautology (always true)",
    Classification.CONTRADICTION: "Contradiction (always false)",
    Classification.CONTINGENCY: "Contingency (sometimes true)",
}


def classify(results: Iterable[bool]) -> Classification:
    """
    Label a column of results.

    Raises:
        ValueError: if the column is empty. A declared variable set always
            produces at least two rows, so this only signals misuse.
    """
    column = list(results)
    if not column:
        raise ValueError("cannot classify an empty truth table")
    if all(column):
        return Classification.TAUTOLOGY
    if not any(column):
        return Classification.CONTRADICTION
    return Classification.CONTINGENCY


__all__ = ["Classification", "classify"]
