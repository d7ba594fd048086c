"""Tests for is_bad_string_array()."""

import pytest

from badchecks.checks.string_array import is_bad_string_array


class TestIsBadStringArray:
    @pytest.mark.parametrize("value", [[], ["a", "b"], ("x",), [""]])
    def test_valid(self, value: object) -> None:
        check_msgs: list[str] = []
        assert is_bad_string_array("p", check_msgs, value, "names") is False
        assert check_msgs == []

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "p: names is null not an array"),
            ("ab", "p: names is type 'string' not an array"),
            ({"a": 1}, "p: names is type 'object' not an array"),
        ],
    )
    def test_not_an_array(self, value: object, expected: str) -> None:
        assert is_bad_string_array("p", [], value, "names") == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (["a", None], "p: names[1] is null not type 'string'"),
            (["a", 1], "p: names[1] is type 'number' not 'string'"),
            ([["x"]], "p: names[0] is an array not type 'string'"),
        ],
    )
    def test_bad_item(self, value: object, expected: str) -> None:
        assert is_bad_string_array("p", [], value, "names") == expected

    def test_only_first_bad_item_reported(self) -> None:
        check_msgs: list[str] = []
        result = is_bad_string_array("p", check_msgs, [1, None, "ok"], "names")
        assert result == "p: names[0] is type 'number' not 'string'"
        assert check_msgs == [result]

    def test_default_identifier(self) -> None:
        assert is_bad_string_array("p", [], [True]) == "p: A value[0] is type 'boolean' not 'string'"
