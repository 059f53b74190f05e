"""
Intermediate columns for the "show steps" table.

The columns are the literal parenthesized groups of the expression as the
user typed it, plus every declared variable and its negation. They are
ordered shortest first so the table reads left to right the way a truth
table is built by hand; the full expression is never one of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence

from .evaluator import evaluate
from .expr import Expr
from .parser import parse
from .symbols import NOT_SYMBOL
from .tokenizer import check_balanced

_OPEN = "({"
_CLOSE = ")}"


@dataclass(frozen=True)
class Step:
    """One intermediate column: its label and the tree it evaluates."""
    label: str
    ast: Expr


def parenthesized_groups(source: str) -> List[str]:
    """Every balanced bracketed substring of ``source``, in order of closing."""
    check_balanced(source)
    groups: List[str] = []
    starts: List[int] = []
    for i, ch in enumerate(source):
        if ch in _OPEN:
            starts.append(i)
        elif ch in _CLOSE:
            groups.append(source[starts.pop():i + 1])
    return groups


def extract_subexpressions(source: str, variables: Sequence[str]) -> List[str]:
    """Deduplicated step labels, shortest first, excluding ``source`` itself."""
    candidates = parenthesized_groups(source)
    for name in variables:
        candidates.append(name)
        candidates.append(f"{NOT_SYMBOL}{name}")

    final = source.strip()
    seen = set()
    labels: List[str] = []
    for label in candidates:
        if label in seen or label == final:
            continue
        seen.add(label)
        labels.append(label)
    # sorted() is stable, so equal lengths keep first-seen order.
    return sorted(labels, key=len)


def build_steps(source: str, variables: Sequence[str]) -> List[Step]:
    return [Step(label, parse(label, variables).ast) for label in extract_subexpressions(source, variables)]


def evaluate_steps(steps: Sequence[Step], assignment: Mapping[str, bool]) -> Dict[str, bool]:
    return {step.label: evaluate(step.ast, assignment) for step in steps}


__all__ = ["Step", "parenthesized_groups", "extract_subexpressions", "build_steps", "evaluate_steps"]
