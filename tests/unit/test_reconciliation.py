"""
Unit tests for split reconciliation.
"""
from src.forward_parsing.reconciliation import (
    exclude_delimiter_line,
    exclude_header_value,
    reconcile_split,
)
from src.models.match_outcome import SplitResult


class TestReconcileSplit:
    def test_none_is_no_match(self):
        assert reconcile_split(None, 3, [2]) is None

    def test_single_repetition_returns_default_slot(self):
        result = SplitResult(slots=("msg", "----", "email"), arity=3)
        assert reconcile_split(result, 3, [2]) == ("msg", "email")
        assert reconcile_split(result, 3, [2], exclude_delimiter_line) == ("msg", "email")

    def test_single_repetition_several_default_slots(self):
        result = SplitResult(slots=("msg\n", "From: a", " a", "\nrest"), arity=4)
        assert reconcile_split(result, 4, [1, 3], exclude_header_value) == ("msg\n", "From: a\nrest")

    def test_length_not_multiple_of_arity(self):
        result = SplitResult(slots=("a", "b", "c", "d", "e"), arity=3)
        assert reconcile_split(result, 3, [2]) is None

    def test_arity_mismatch(self):
        result = SplitResult(slots=("a", "b", "c"), arity=3)
        assert reconcile_split(result, 4, [3]) is None

    def test_empty_result(self):
        assert reconcile_split(SplitResult(slots=(), arity=3), 3, [2]) is None

    def test_nested_separators_dropped(self):
        result = SplitResult(
            slots=("msg\n", "---- sep ----", "one\n", "", "---- sep ----", "two"),
            arity=3,
        )
        head, tail = reconcile_split(result, 3, [2], exclude_delimiter_line)
        assert head == "msg\n"
        assert tail == "one\ntwo"

    def test_nested_separators_kept_without_predicate(self):
        result = SplitResult(slots=("msg\n", "----", "one\n", "", "----", "two"), arity=3)
        assert reconcile_split(result, 3, [2]) == ("msg\n", "one\n----two")

    def test_nested_headers_keep_lines_drop_values(self):
        result = SplitResult(
            slots=(
                "From: a\n", "Subject: x", " x", "\n\nfirst\n",
                "", "Subject: y", " y", "\n\nsecond",
            ),
            arity=4,
        )
        head, tail = reconcile_split(result, 4, [3], exclude_header_value)
        assert head == "From: a\n"
        assert tail == "\n\nfirst\nSubject: y\n\nsecond"

    def test_three_repetitions_in_order(self):
        slots = ("h", "|", "1", "", "|", "2", "", "|", "3")
        _, tail = reconcile_split(SplitResult(slots=slots, arity=3), 3, [2], exclude_delimiter_line)
        assert tail == "123"
