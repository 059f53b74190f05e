"""
Tests for proplogic/truthtab.py formatting.
"""

import pytest

from proplogic.engine import evaluate_expression
from proplogic.truthtab import format_value


class TestFormatValue:

    @pytest.mark.parametrize(
        "style,true_mark,false_mark",
        [("TF", "T", "F"), ("VF", "V", "F"), ("01", "1", "0")],
    )
    def test_styles(self, style, true_mark, false_mark):
        assert format_value(True, style) == true_mark
        assert format_value(False, style) == false_mark

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            format_value(True, "YN")


class TestRenderTable:

    def test_render(self):
        table = evaluate_expression("p∧q", ["p", "q"]).table
        lines = table.render().splitlines()
        assert lines[0] == "p | q | p∧q"
        assert lines[2] == "T | T |  T"
        assert lines[3] == "T | F |  F"
        assert len(lines) == 6

    def test_render_with_steps_and_binary_style(self):
        table = evaluate_expression("p∨¬p", ["p"], show_steps=True).table
        # variable columns come first, then the atom steps
        assert table.columns == ["p", "p", "¬p", "p∨¬p"]
        lines = table.render("01").splitlines()
        assert lines[2].split(" | ")[0] == "1"
        assert [line.split("|")[-1].strip() for line in lines[2:]] == ["1", "1"]
