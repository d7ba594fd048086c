"""Tests for is_bad_boolean()."""

from badchecks.checks.boolean import is_bad_boolean


class TestIsBadBoolean:
    def test_accumulates_explanations(self) -> None:
        check_msgs: list[str] = []

        assert is_bad_boolean("a", check_msgs, None, "b") == "a: b is null not type 'boolean'"
        assert check_msgs == ["a: b is null not type 'boolean'"]

        assert is_bad_boolean("c", check_msgs, [True], "d") == "c: d is an array not type 'boolean'"
        assert check_msgs[1] == "c: d is an array not type 'boolean'"

        assert is_bad_boolean("e", check_msgs, {}, "f") == "e: f is type 'object' not 'boolean'"
        assert check_msgs[2] == "e: f is type 'object' not 'boolean'"
        assert len(check_msgs) == 3

    def test_valid_booleans(self) -> None:
        check_msgs: list[str] = []
        assert is_bad_boolean("g", check_msgs, True, "h") is False
        assert is_bad_boolean("i", check_msgs, bool(0), "j") is False
        assert check_msgs == []

    def test_numbers_are_not_booleans(self) -> None:
        check_msgs: list[str] = []
        assert is_bad_boolean("p", check_msgs, 1) == "p: A value is type 'number' not 'boolean'"
        assert is_bad_boolean("p", check_msgs, 0.0, "zero") == "p: zero is type 'number' not 'boolean'"
        assert len(check_msgs) == 2

    def test_existing_messages_kept(self) -> None:
        check_msgs = ["first"]
        is_bad_boolean("p", check_msgs, "no", "flag")
        assert check_msgs == ["first", "p: flag is type 'string' not 'boolean'"]
