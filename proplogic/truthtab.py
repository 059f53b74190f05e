"""
Truth table rows and plain-text formatting.

A row holds one assignment and the value of every observed expression
under it: the intermediate step columns, if any, and the final expression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple

OUTPUT_STYLES: Mapping[str, Tuple[str, str]] = {
    "TF": ("T", "F"),
    "VF": ("V", "F"),
    "01": ("1", "0"),
}


def format_value(value: bool, style: str = "TF") -> str:
    try:
        true_mark, false_mark = OUTPUT_STYLES[style]
    except KeyError:
        raise ValueError(f"unknown output style {style!r}; expected one of {sorted(OUTPUT_STYLES)}") from None
    return true_mark if value else false_mark


@dataclass(frozen=True)
class TruthRow:
    index: int
    assignment: Dict[str, bool]
    values: Dict[str, bool]
    result: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "assignment": dict(self.assignment),
            "values": dict(self.values),
            "result": self.result,
        }


@dataclass(frozen=True)
class TruthTable:
    variables: Tuple[str, ...]
    expression: str
    steps: Tuple[str, ...]
    rows: Tuple[TruthRow, ...]

    @property
    def results(self) -> List[bool]:
        return [row.result for row in self.rows]

    @property
    def columns(self) -> List[str]:
        return list(self.variables) + list(self.steps) + [self.expression]

    def render(self, style: str = "TF") -> str:
        return render_table(self, style)


def render_table(table: TruthTable, style: str = "TF") -> str:
    """Render an aligned plain-text table, one line per row."""
    headers = table.columns
    body: List[List[str]] = []
    for row in table.rows:
        cells = [format_value(row.assignment[v], style) for v in table.variables]
        cells += [format_value(row.values[s], style) for s in table.steps]
        cells.append(format_value(row.result, style))
        body.append(cells)

    widths = [len(h) for h in headers]
    lines = [_join(headers, widths), _join(["-" * w for w in widths], widths)]
    lines.extend(_join(cells, widths) for cells in body)
    return "\n".join(lines)


def _join(cells: Sequence[str], widths: Sequence[int]) -> str:
    return " | ".join(c.center(w) for c, w in zip(cells, widths)).rstrip()


__all__ = ["OUTPUT_STYLES", "format_value", "TruthRow", "TruthTable", "render_table"]
