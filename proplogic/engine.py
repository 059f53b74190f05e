"""
Evaluation pipeline.

    raw string → symbols → tokens → postfix → tree
        → assignments × evaluator → classification
        → gate graph

One call handles one request from scratch and either returns a complete
result or raises the first ``EngineError`` met; nothing is cached between
calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .assignments import iter_assignments, validate_variables
from .classify import Classification, classify
from .config import EngineConfig
from .errors import EmptyExpression, EngineError
from .evaluator import evaluate as evaluate_expr
from .expr import Expr
from .gates import GateGraph, build_gate_graph
from .parser import ParsedExpression, parse
from .rewrite import eliminate_conditionals
from .steps import Step, build_steps, evaluate_steps
from .tokenizer import Token
from .truthtab import TruthRow, TruthTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationRequest:
    expression: str
    variables: Tuple[str, ...]
    show_steps: Optional[bool] = None

    @classmethod
    def of(cls, expression: str, variables: Sequence[str], show_steps: Optional[bool] = None) -> "EvaluationRequest":
        return cls(expression=expression, variables=tuple(variables), show_steps=show_steps)


@dataclass(frozen=True)
class EvaluationResult:
    request: EvaluationRequest
    parsed: ParsedExpression
    table: TruthTable
    classification: Classification
    simplified: Expr
    gate_graph: GateGraph
    sub_expressions: Optional[Tuple[str, ...]] = None

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self.parsed.tokens

    @property
    def ast(self) -> Expr:
        return self.parsed.ast

    @property
    def rows(self) -> Tuple[TruthRow, ...]:
        return self.table.rows

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "expression": self.request.expression,
            "normalized": self.parsed.normalized,
            "variables": list(self.request.variables),
            "tokens": [t.to_dict() for t in self.parsed.tokens],
            "postfix": [t.value for t in self.parsed.postfix],
            "ast": self.parsed.ast.to_dict(),
            "rows": [row.to_dict() for row in self.table.rows],
            "classification": self.classification.value,
            "classification_label": self.classification.label,
            "simplified": self.simplified.to_text(),
            "gate_graph": self.gate_graph.to_dict(),
            "gate_summary": self.gate_graph.summary(len(self.request.variables)),
        }
        if self.sub_expressions is not None:
            out["sub_expressions"] = list(self.sub_expressions)
        return out


def build_truth_table(
    parsed: ParsedExpression,
    variables: Sequence[str],
    steps: Sequence[Step] = (),
) -> TruthTable:
    rows: List[TruthRow] = []
    final_label = parsed.source
    for index, assignment in enumerate(iter_assignments(variables)):
        values = evaluate_steps(steps, assignment)
        result = evaluate_expr(parsed.ast, assignment)
        values[final_label] = result
        rows.append(TruthRow(index=index, assignment=assignment, values=values, result=result))
    return TruthTable(
        variables=tuple(variables),
        expression=final_label,
        steps=tuple(step.label for step in steps),
        rows=tuple(rows),
    )


def evaluate(request: EvaluationRequest, config: Optional[EngineConfig] = None) -> EvaluationResult:
    """
    Run the full pipeline for one request.

    Raises:
        EngineError: the first failure from any stage; no partial result.
    """
    config = config or EngineConfig()
    show_steps = config.show_steps if request.show_steps is None else request.show_steps
    try:
        if not request.expression or not request.expression.strip():
            raise EmptyExpression()
        variables = validate_variables(request.variables, config.max_variables)
        source = request.expression.strip()
        parsed = parse(source, variables)
        steps = build_steps(source, variables) if show_steps else []
        table = build_truth_table(parsed, variables, steps)
        classification = classify(table.results)
        graph = build_gate_graph(parsed.ast)
    except EngineError as exc:
        logger.warning("rejected %r: %s", request.expression, exc)
        raise

    logger.debug(
        "%s over %s: %d rows, %s, %d gates",
        parsed.source,
        ",".join(variables),
        len(table.rows),
        classification.value,
        len(graph.gates),
    )
    return EvaluationResult(
        request=request,
        parsed=parsed,
        table=table,
        classification=classification,
        simplified=eliminate_conditionals(parsed.ast),
        gate_graph=graph,
        sub_expressions=tuple(table.steps) if show_steps else None,
    )


def evaluate_expression(
    expression: str,
    variables: Sequence[str],
    show_steps: Optional[bool] = None,
    config: Optional[EngineConfig] = None,
) -> EvaluationResult:
    return evaluate(EvaluationRequest.of(expression, variables, show_steps), config)


__all__ = [
    "EvaluationRequest",
    "EvaluationResult",
    "build_truth_table",
    "evaluate",
    "evaluate_expression",
]
