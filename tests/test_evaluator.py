"""
Tests for proplogic/evaluator.py.
"""

import itertools

import pytest

from proplogic.assignments import iter_assignments
from proplogic.errors import UnboundVariable, UnrecognizedStructure
from proplogic.evaluator import evaluate, evaluate_postfix
from proplogic.expr import conj, disj, iff, implies, neg, var, xor
from proplogic.parser import parse

P, Q, R = var("p"), var("q"), var("r")


class TestEvaluate:

    @pytest.mark.parametrize("a,b", list(itertools.product([True, False], repeat=2)))
    def test_connectives(self, a, b):
        env = {"p": a, "q": b}
        assert evaluate(neg(P), env) == (not a)
        assert evaluate(conj(P, Q), env) == (a and b)
        assert evaluate(disj(P, Q), env) == (a or b)
        assert evaluate(xor(P, Q), env) == (a != b)
        assert evaluate(implies(P, Q), env) == ((not a) or b)
        assert evaluate(iff(P, Q), env) == (a == b)

    def test_unbound_variable(self):
        with pytest.raises(UnboundVariable) as exc_info:
            evaluate(conj(P, var("z")), {"p": True})
        assert exc_info.value.token == "z"

    def test_unknown_node(self):
        with pytest.raises(UnrecognizedStructure):
            evaluate("p", {"p": True})

    def test_pure(self):
        tree = implies(conj(P, Q), R)
        env = {"p": True, "q": True, "r": False}
        assert evaluate(tree, env) is evaluate(tree, env) is False
        assert env == {"p": True, "q": True, "r": False}


class TestPostfixAgreement:
    """Stack evaluation of the postfix output matches a hand-built tree."""

    @pytest.mark.parametrize(
        "source,tree",
        [
            ("p∧q∨r", disj(conj(P, Q), R)),
            ("p→q→r", implies(P, implies(Q, R))),
            ("¬(p↔q)△r", xor(neg(iff(P, Q)), R)),
            ("(p→q)∧(q→r)→(p→r)", implies(conj(implies(P, Q), implies(Q, R)), implies(P, R))),
            ("¬¬p∨¬q∧r", disj(neg(neg(P)), conj(neg(Q), R))),
        ],
    )
    def test_round_trip(self, source, tree):
        variables = ["p", "q", "r"]
        parsed = parse(source, variables)
        for env in iter_assignments(variables):
            assert evaluate_postfix(parsed.postfix, env) == evaluate(tree, env)
            assert evaluate(parsed.ast, env) == evaluate(tree, env)

    def test_postfix_unbound(self):
        parsed = parse("p∧q", ["p", "q"])
        with pytest.raises(UnboundVariable):
            evaluate_postfix(parsed.postfix, {"p": True})
