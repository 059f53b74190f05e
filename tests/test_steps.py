"""
Tests for proplogic/steps.py intermediate columns.
"""

import pytest

from proplogic.errors import UnbalancedParentheses
from proplogic.steps import build_steps, evaluate_steps, extract_subexpressions, parenthesized_groups


class TestParenthesizedGroups:

    def test_nested_groups_in_closing_order(self):
        assert parenthesized_groups("((p∧q)∨r)→q") == ["(p∧q)", "((p∧q)∨r)"]

    def test_braces_count(self):
        assert parenthesized_groups("{p∧q}∨(r)") == ["{p∧q}", "(r)"]

    def test_unbalanced(self):
        with pytest.raises(UnbalancedParentheses):
            parenthesized_groups("(p∧q")


class TestExtractSubexpressions:

    def test_sorted_by_length_atoms_first(self):
        labels = extract_subexpressions("(p∧q)∨(¬p)", ["p", "q"])
        assert labels == ["p", "q", "¬p", "¬q", "(¬p)", "(p∧q)"]

    def test_duplicates_removed(self):
        labels = extract_subexpressions("(p∧q)→(p∧q)", ["p", "q"])
        assert labels.count("(p∧q)") == 1

    def test_whole_expression_excluded(self):
        assert extract_subexpressions("(p∧q)", ["p", "q"]) == ["p", "q", "¬p", "¬q"]

    def test_literal_text_is_kept(self):
        labels = extract_subexpressions("(p -> q) && r", ["p", "q", "r"])
        assert "(p -> q)" in labels

    def test_unused_variables_still_listed(self):
        labels = extract_subexpressions("p", ["p", "q"])
        assert labels == ["q", "¬p", "¬q"]


class TestEvaluateSteps:

    def test_values(self):
        steps = build_steps("(p -> q) && r", ["p", "q", "r"])
        values = evaluate_steps(steps, {"p": True, "q": False, "r": True})
        assert values == {
            "p": True,
            "q": False,
            "r": True,
            "¬p": False,
            "¬q": True,
            "¬r": False,
            "(p -> q)": False,
        }
