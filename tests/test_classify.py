"""
Tests for proplogic/classify.py.
"""

import itertools

import pytest

from proplogic.classify import Classification, classify


class TestClassify:

    def test_tautology(self):
        assert classify([True, True]) is Classification.TAUTOLOGY

    def test_contradiction(self):
        assert classify([False, False, False, False]) is Classification.CONTRADICTION

    def test_contingency(self):
        assert classify([True, False, False, False]) is Classification.CONTINGENCY

    @pytest.mark.parametrize("column", list(itertools.product([True, False], repeat=3)))
    def test_total(self, column):
        result = classify(column)
        assert result in set(Classification)
        if result is not Classification.CONTINGENCY:
            assert len(set(column)) == 1

    def test_accepts_iterators(self):
        assert classify(iter([True])) is Classification.TAUTOLOGY

    def test_empty_column(self):
        with pytest.raises(ValueError):
            classify([])

    def test_labels(self):
        assert Classification.TAUTOLOGY.label == "Tautology (always true)"
        assert Classification.CONTRADICTION.label == "Contradiction (always false)"
        assert Classification.CONTINGENCY.label == "Contingency (sometimes true)"
