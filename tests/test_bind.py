"""Tests for bind_bad_checks()."""

from __future__ import annotations

import pytest

from badchecks.bind import bind_bad_checks
from badchecks.checks import is_bad_boolean, is_bad_integer, is_bad_string
from badchecks.errors import BadArgumentError


def spy1(pfx: str, msgs: list[str], a: object, b: object, c: object) -> str | bool:
    msgs.append(f"{pfx}: spy1 {a}{b}{c}")
    return False


def spy2(pfx: str, msgs: list[str], a: object, b: object, c: object) -> str | bool:
    msgs.append(f"{pfx}: spy2 {a}{b}{c}")
    return f"{pfx}: spy2 {a}{b}{c}"


class TestMsgPrefixFaults:
    @pytest.mark.parametrize(
        "msg_prefix,expected",
        [
            (None, "bind_bad_checks(): msg_prefix is null not 'string'"),
            (True, "bind_bad_checks(): msg_prefix is type 'boolean' not 'string'"),
            (123, "bind_bad_checks(): msg_prefix is type 'number' not 'string'"),
            ([], "bind_bad_checks(): msg_prefix is an array not 'string'"),
            ({}, "bind_bad_checks(): msg_prefix is type 'object' not 'string'"),
        ],
    )
    def test_non_string_prefix(self, msg_prefix: object, expected: str) -> None:
        with pytest.raises(BadArgumentError) as exc_info:
            bind_bad_checks(msg_prefix, spy1)  # type: ignore[arg-type]
        assert str(exc_info.value) == expected
        assert exc_info.value.argument == "msg_prefix"


class TestBadChecksFaults:
    def test_non_callable_first(self) -> None:
        with pytest.raises(BadArgumentError) as exc_info:
            bind_bad_checks("", 1e3)  # type: ignore[arg-type]
        assert str(exc_info.value) == "bind_bad_checks(): bad_checks[0] is type 'number' not 'function'"

    def test_names_offending_index(self) -> None:
        with pytest.raises(BadArgumentError) as exc_info:
            bind_bad_checks("f()", is_bad_string, spy1, "spy")  # type: ignore[arg-type]
        assert str(exc_info.value) == "bind_bad_checks(): bad_checks[2] is type 'string' not 'function'"

    def test_null_check(self) -> None:
        with pytest.raises(BadArgumentError, match=r"bad_checks\[0\] is type 'null' not 'function'"):
            bind_bad_checks("f()", None)  # type: ignore[arg-type]


class TestReturnShape:
    def test_no_checks(self) -> None:
        assert bind_bad_checks("") == ([],)
        assert bind_bad_checks("foo()") == ([],)

    def test_one_check(self) -> None:
        result = bind_bad_checks("foo()", spy1)
        assert isinstance(result, tuple)
        assert len(result) == 2
        assert result[0] == []
        assert callable(result[1])

    def test_two_checks(self) -> None:
        check_msgs, bound1, bound2 = bind_bad_checks("p", spy1, spy2)
        assert check_msgs == []
        assert callable(bound1)
        assert callable(bound2)

    def test_fresh_list_per_session(self) -> None:
        first, _ = bind_bad_checks("a", spy1)
        second, _ = bind_bad_checks("a", spy1)
        assert first is not second

    def test_bound_name_follows_check(self) -> None:
        _, bound = bind_bad_checks("p", is_bad_string)
        assert bound.__name__ == "is_bad_string"


class TestBoundChecks:
    def test_typical_usage(self) -> None:
        check_msgs, bound_spy1, bound_spy2 = bind_bad_checks("foo()", spy1, spy2)
        assert check_msgs == []

        assert bound_spy1("A", "B", "C") is False
        assert check_msgs == ["foo(): spy1 ABC"]

        assert bound_spy2("A", "B", "C") == "foo(): spy2 ABC"
        assert check_msgs == ["foo(): spy1 ABC", "foo(): spy2 ABC"]

    def test_invalid_appends_exactly_the_explanation(self) -> None:
        check_msgs, is_bad_bool = bind_bad_checks("save()", is_bad_boolean)
        result = is_bad_bool("yes", "overwrite")
        assert result == "save(): overwrite is type 'string' not 'boolean'"
        assert check_msgs == [result]

    def test_valid_leaves_list_unchanged(self) -> None:
        check_msgs, is_bad_bool = bind_bad_checks("save()", is_bad_boolean)
        assert is_bad_bool(False, "overwrite") is False
        assert check_msgs == []

    def test_repeated_invalid_calls_are_logged_twice(self) -> None:
        check_msgs, is_bad_str = bind_bad_checks("f()", is_bad_string)
        first = is_bad_str(None, "name")
        second = is_bad_str(None, "name")
        assert first == second
        assert check_msgs == [first, second]

    def test_checks_share_one_list(self) -> None:
        check_msgs, is_bad_str, is_bad_int = bind_bad_checks(
            "resize()", is_bad_string, is_bad_integer
        )
        is_bad_str(7, "name")
        is_bad_int(5000, "width", 1, 4096)
        assert check_msgs == [
            "resize(): name is type 'number' not 'string'",
            "resize(): width is 5000 which is above the maximum 4096",
        ]

    def test_keyword_arguments_forwarded(self) -> None:
        check_msgs, is_bad_int = bind_bad_checks("f()", is_bad_integer)
        assert is_bad_int(9, identifier="n", divisible_by=3) is False
        assert is_bad_int(10, identifier="n", divisible_by=3) == "f(): n is 10 which is not divisible by 3"
        assert len(check_msgs) == 1

    def test_fault_in_bound_check_propagates_without_mutation(self) -> None:
        check_msgs, is_bad_int = bind_bad_checks("f()", is_bad_integer)
        is_bad_int("x", "n")
        with pytest.raises(BadArgumentError):
            is_bad_int(3, "n", 0, 10, 0)
        assert check_msgs == ["f(): n is type 'string' not 'number'"]

    def test_caller_owns_the_list(self) -> None:
        check_msgs, is_bad_str = bind_bad_checks("f()", is_bad_string)
        is_bad_str(1)
        check_msgs.clear()
        is_bad_str(2)
        assert check_msgs == ["f(): A value is type 'number' not 'string'"]
