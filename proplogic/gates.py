"""
Decomposition of an expression tree into a logic-gate graph.

Each connective becomes one gate, so the graph mirrors the tree: a gate
feeds exactly one parent, while a variable may feed any number of gates.
A negation sitting directly on AND, OR or XOR is folded into the gate
below it (NAND, NOR, XNOR) instead of producing a separate NOT gate.

Implication has no gate of its own and is reported as OR, modelling
``¬a ∨ b`` without the inverter on the left input.

Ids are ``gate1``, ``gate2``, ... in top-down traversal order. The counter
lives on the builder instance; build a new builder per expression.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import UnrecognizedStructure
from .expr import Binary, Expr, Unary, Var
from .symbols import OpKind

logger = logging.getLogger(__name__)


class GateType(Enum):
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    NAND = "NAND"
    NOR = "NOR"
    XOR = "XOR"
    XNOR = "XNOR"


class InputSlot(Enum):
    SINGLE = "single"
    LEFT = "left"
    RIGHT = "right"


_BINARY_GATES = {
    OpKind.AND: GateType.AND,
    OpKind.OR: GateType.OR,
    OpKind.IMPLIES: GateType.OR,
    OpKind.IFF: GateType.XNOR,
    OpKind.XOR: GateType.XOR,
}

_NEGATED_GATES = {
    OpKind.AND: GateType.NAND,
    OpKind.OR: GateType.NOR,
    OpKind.XOR: GateType.XNOR,
}


@dataclass(frozen=True, slots=True)
class GateRef:
    gate_id: str

    def to_dict(self) -> Dict[str, str]:
        return {"gate": self.gate_id}


@dataclass(frozen=True, slots=True)
class VariableRef:
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"variable": self.name}


InputRef = Union[GateRef, VariableRef]


@dataclass(frozen=True)
class Gate:
    id: str
    type: GateType
    inputs: Tuple[InputRef, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "inputs": [ref.to_dict() for ref in self.inputs],
        }


@dataclass(frozen=True)
class Connection:
    """Edge from a gate or variable into one input slot of a gate."""
    source: InputRef
    target: str
    slot: InputSlot

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source.to_dict(), "to": self.target, "slot": self.slot.value}


@dataclass(frozen=True)
class GateGraph:
    gates: Tuple[Gate, ...]
    connections: Tuple[Connection, ...]
    output: InputRef
    counts_by_type: Dict[GateType, int] = field(default_factory=dict)

    @property
    def output_gate_id(self) -> Optional[str]:
        """Id of the gate producing the result; None for a bare variable."""
        if isinstance(self.output, GateRef):
            return self.output.gate_id
        return None

    def gate(self, gate_id: str) -> Gate:
        for g in self.gates:
            if g.id == gate_id:
                return g
        raise KeyError(gate_id)

    def levels(self) -> Dict[str, int]:
        """Distance of every gate from the output gate (output is level 0)."""
        result: Dict[str, int] = {}
        if self.output_gate_id is None:
            return result
        by_id = {g.id: g for g in self.gates}
        queue = deque([(self.output_gate_id, 0)])
        while queue:
            gate_id, level = queue.popleft()
            result[gate_id] = level
            for ref in by_id[gate_id].inputs:
                if isinstance(ref, GateRef):
                    queue.append((ref.gate_id, level + 1))
        return result

    def summary(self, input_count: int) -> Dict[str, Any]:
        present = {t.value: n for t, n in self.counts_by_type.items() if n > 0}
        return {
            "inputs": input_count,
            "outputs": 1,
            "total_gates": len(self.gates),
            "gates": present,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gates": [g.to_dict() for g in self.gates],
            "connections": [c.to_dict() for c in self.connections],
            "output": self.output.to_dict(),
            "output_gate_id": self.output_gate_id,
            "counts_by_type": {t.value: n for t, n in self.counts_by_type.items()},
            "levels": self.levels(),
        }


class GateGraphBuilder:
    """Single-use builder; owns the id counter for one expression."""

    def __init__(self):
        self._next_id = 0
        self._gates: List[Optional[Gate]] = []
        self._connections: List[Connection] = []
        self._counts: Dict[GateType, int] = {t: 0 for t in GateType}
        self._used = False

    def build(self, expr: Expr) -> GateGraph:
        if self._used:
            raise RuntimeError("GateGraphBuilder instances are single-use")
        self._used = True
        output = self._visit(expr)
        gates = tuple(g for g in self._gates if g is not None)
        logger.debug("built %d gates for %s", len(gates), expr.to_text())
        return GateGraph(
            gates=gates,
            connections=tuple(self._connections),
            output=output,
            counts_by_type=dict(self._counts),
        )

    def _allocate(self, gate_type: GateType) -> Tuple[str, int]:
        self._next_id += 1
        gate_id = f"gate{self._next_id}"
        self._counts[gate_type] += 1
        self._gates.append(None)
        return gate_id, len(self._gates) - 1

    def _link(self, child: Expr, target: str, slot: InputSlot) -> InputRef:
        ref = self._visit(child)
        self._connections.append(Connection(ref, target, slot))
        return ref

    def _visit(self, expr: Expr) -> InputRef:
        if isinstance(expr, Var):
            return VariableRef(expr.name)

        if isinstance(expr, Unary) and expr.op is OpKind.NOT:
            child = expr.operand
            if isinstance(child, Binary) and child.op in _NEGATED_GATES:
                return self._binary_gate(child, _NEGATED_GATES[child.op])
            gate_id, slot_index = self._allocate(GateType.NOT)
            ref = self._link(child, gate_id, InputSlot.SINGLE)
            self._gates[slot_index] = Gate(gate_id, GateType.NOT, (ref,))
            return GateRef(gate_id)

        if isinstance(expr, Binary) and expr.op in _BINARY_GATES:
            return self._binary_gate(expr, _BINARY_GATES[expr.op])

        raise UnrecognizedStructure(f"no gate for node {expr!r}")

    def _binary_gate(self, expr: Binary, gate_type: GateType) -> GateRef:
        gate_id, slot_index = self._allocate(gate_type)
        left = self._link(expr.left, gate_id, InputSlot.LEFT)
        right = self._link(expr.right, gate_id, InputSlot.RIGHT)
        self._gates[slot_index] = Gate(gate_id, gate_type, (left, right))
        return GateRef(gate_id)


def build_gate_graph(expr: Expr) -> GateGraph:
    return GateGraphBuilder().build(expr)


__all__ = [
    "GateType",
    "InputSlot",
    "GateRef",
    "VariableRef",
    "InputRef",
    "Gate",
    "Connection",
    "GateGraph",
    "GateGraphBuilder",
    "build_gate_graph",
]
