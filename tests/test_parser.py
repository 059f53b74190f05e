"""
Tests for proplogic/parser.py shunting-yard parsing.
"""

import pytest

from proplogic.errors import EmptyExpression, MalformedExpression, UnbalancedParentheses
from proplogic.expr import Binary, Unary, Var, conj, disj, iff, implies, neg, var, xor
from proplogic.parser import build_ast, parse, to_postfix
from proplogic.symbols import OpKind
from proplogic.tokenizer import tokenize

P, Q, R = var("p"), var("q"), var("r")
PQR = ["p", "q", "r"]


def postfix_of(s):
    return " ".join(t.value for t in to_postfix(tokenize(s, PQR)))


class TestPostfix:

    @pytest.mark.parametrize(
        "infix,postfix",
        [
            ("p∧q∨r", "p q ∧ r ∨"),
            ("p∨q∧r", "p q r ∧ ∨"),
            ("(p∨q)∧r", "p q ∨ r ∧"),
            ("¬p∧q", "p ¬ q ∧"),
            ("p∧¬q", "p q ¬ ∧"),
            ("¬¬p", "p ¬ ¬"),
            ("p→q→r", "p q r → →"),
            ("p↔q↔r", "p q ↔ r ↔"),
            ("p∨q△r", "p q ∨ r △"),
            ("p→q↔r", "p q → r ↔"),
        ],
    )
    def test_precedence_and_associativity(self, infix, postfix):
        assert postfix_of(infix) == postfix

    def test_stray_closing_paren(self):
        # balance precheck bypassed: feed tokens straight to the parser
        tokens = tokenize("p", PQR) + tokenize("(q)", PQR)[2:]
        with pytest.raises(UnbalancedParentheses):
            to_postfix(tokens)

    def test_unclosed_paren(self):
        tokens = tokenize("(p)", PQR)[:2]
        with pytest.raises(UnbalancedParentheses):
            to_postfix(tokens)


class TestParse:
    """Parsing strings into trees."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("p", P),
            ("¬p", neg(P)),
            ("p∧q", conj(P, Q)),
            ("p ∨ q ∧ r", disj(P, conj(Q, R))),
            ("p -> q -> r", implies(P, implies(Q, R))),
            ("p <-> q <-> r", iff(iff(P, Q), R)),
            ("(p→q)△(q→p)", xor(implies(P, Q), implies(Q, P))),
            ("~(p && q)", neg(conj(P, Q))),
            ("{p + q} * r", conj(disj(P, Q), R)),
        ],
    )
    def test_trees(self, source, expected):
        assert parse(source, PQR).ast == expected

    def test_parsed_expression_fields(self):
        parsed = parse("p -> q", PQR)
        assert parsed.source == "p -> q"
        assert parsed.normalized == "p → q"
        assert [t.value for t in parsed.tokens] == ["p", "→", "q"]
        assert [t.value for t in parsed.postfix] == ["p", "q", "→"]
        assert isinstance(parsed.ast, Binary)
        assert parsed.ast.op is OpKind.IMPLIES

    def test_node_types(self):
        ast = parse("¬p", PQR).ast
        assert isinstance(ast, Unary)
        assert isinstance(ast.operand, Var)

    @pytest.mark.parametrize(
        "source",
        ["p∧", "∧p", "p q", "()", "p¬q", "p∧∧q", "¬", "p¬", "p q ∧", "∧ p q", "p ∧ q ¬", "(p)(q)", "p(q)", "(∧p)"],
    )
    def test_malformed(self, source):
        with pytest.raises(MalformedExpression):
            parse(source, PQR)

    def test_empty(self):
        with pytest.raises(EmptyExpression):
            parse("   ", PQR)

    def test_unbalanced(self):
        with pytest.raises(UnbalancedParentheses):
            parse("(p∧", PQR)

    def test_misplaced_token_position(self):
        with pytest.raises(MalformedExpression) as exc_info:
            parse("p q ∧", PQR)
        assert exc_info.value.token == "q"
        assert exc_info.value.position == 2

    def test_trailing_operator_position(self):
        with pytest.raises(MalformedExpression) as exc_info:
            parse("p ∧ q ¬", PQR)
        assert exc_info.value.token == "¬"
        assert exc_info.value.position == 6

    def test_build_ast_underflow_reports_operator(self):
        # tokens of "p∧" are already a (short) postfix sequence
        with pytest.raises(MalformedExpression) as exc_info:
            build_ast(tokenize("p∧", PQR))
        assert exc_info.value.token == "∧"


class TestExprRendering:

    def test_to_text_wraps_compound_operands(self):
        assert conj(disj(P, Q), R).to_text() == "(p∨q)∧r"
        assert neg(conj(P, Q)).to_text() == "¬(p∧q)"
        assert neg(neg(P)).to_text() == "¬¬p"

    def test_round_trip_through_text(self):
        tree = implies(conj(P, neg(Q)), iff(Q, R))
        assert parse(tree.to_text(), PQR).ast == tree

    def test_atoms_and_depth(self):
        tree = implies(conj(P, neg(Q)), P)
        assert tree.atoms() == frozenset({"p", "q"})
        assert tree.depth() == 3

    def test_arity_enforced(self):
        with pytest.raises(ValueError):
            Unary(OpKind.AND, P)
        with pytest.raises(ValueError):
            Binary(OpKind.NOT, P, Q)
