"""Test console formatting and the log/error/warn entry points."""

from dataclasses import dataclass

import pytest

from hermesx.console import Console, format_args, format_value
from hermesx.values import NULL, UNDEFINED


class TestFormatValue:
    """Per-value formatting rules."""

    def test_null_and_undefined(self):
        assert format_value(NULL) == "null"
        assert format_value(UNDEFINED) == "undefined"
        assert format_value(None) == "undefined"

    def test_string_is_not_quoted(self):
        assert format_value("hello world") == "hello world"
        assert format_value("") == ""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (42, "42"),
            (1.5, "1.5"),
            (3.0, "3"),
            (-0.0, "0"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (True, "true"),
            (False, "false"),
        ],
    )
    def test_numbers_and_booleans(self, value, expected):
        assert format_value(value) == expected

    def test_named_function(self):
        def greet():
            pass

        assert format_value(greet) == "[Function: greet]"

    def test_lambda_is_anonymous(self):
        assert format_value(lambda: None) == "[Function: anonymous]"

    def test_builtin_function(self):
        assert format_value(len) == "[Function: len]"

    def test_plain_object_indented(self):
        assert format_value({"a": 1, "b": "x"}) == '{\n  "a": 1,\n  "b": "x"\n}'

    def test_nested_object(self):
        assert format_value({"a": {"b": [1, 2]}}) == (
            '{\n  "a": {\n    "b": [\n      1,\n      2\n    ]\n  }\n}'
        )

    def test_array(self):
        assert format_value([1, "two", None]) == '[\n  1,\n  "two",\n  null\n]'

    def test_empty_containers(self):
        assert format_value({}) == "{}"
        assert format_value([]) == "[]"

    def test_functions_and_undefined_skipped_in_objects(self):
        obj = {"keep": True, "fn": print, "gone": UNDEFINED}
        assert format_value(obj) == '{\n  "keep": true\n}'

    def test_functions_become_null_in_arrays(self):
        assert format_value([print, UNDEFINED]) == "[\n  null,\n  null\n]"

    def test_integral_floats_inside_objects(self):
        assert format_value({"n": 2.0, "x": float("nan")}) == '{\n  "n": 2,\n  "x": null\n}'

    def test_dataclass(self):
        @dataclass
        class Point:
            x: int
            y: int

        assert format_value(Point(1, 2)) == '{\n  "x": 1,\n  "y": 2\n}'

    def test_plain_object_attributes(self):
        class Thing:
            def __init__(self):
                self.name = "box"
                self._hidden = 1

        assert format_value(Thing()) == '{\n  "name": "box"\n}'

    def test_circular_structure_falls_back(self):
        obj = {"name": "loop"}
        obj["self"] = obj
        assert format_value(obj) == "[object Object]"

    def test_circular_list_falls_back(self):
        items = [1]
        items.append(items)
        assert format_value(items) == "[object Object]"

    def test_shared_reference_is_not_a_cycle(self):
        shared = {"v": 1}
        assert format_value([shared, shared]) == (
            '[\n  {\n    "v": 1\n  },\n  {\n    "v": 1\n  }\n]'
        )

    def test_values_without_properties(self):
        assert format_value({1, 2}) == "{}"
        assert format_value({"tags": {"a"}}) == '{\n  "tags": {}\n}'

    def test_exception(self):
        assert format_value(ValueError("bad input")) == "ValueError: bad input"

    def test_unicode_is_kept(self):
        assert format_value({"msg": "héllo"}) == '{\n  "msg": "héllo"\n}'


class TestFormatArgs:
    def test_joined_by_single_space(self):
        assert format_args("a", 1, True, NULL, UNDEFINED) == "a 1 true null undefined"

    def test_no_args(self):
        assert format_args() == ""

    def test_values_formatted_independently(self):
        assert format_args("obj:", {"a": 1}) == 'obj: {\n  "a": 1\n}'


class TestConsole:
    @pytest.fixture
    def lines(self):
        return []

    @pytest.fixture
    def console(self, lines, clock):
        return Console(lines.append, lambda: int(clock()))

    def test_log(self, console, lines):
        console.log("hello", 42)
        assert lines == ["hello 42"]

    def test_error_prefix(self, console, lines):
        console.error("boom", {"code": 1})
        assert lines == ['ERROR: boom {\n  "code": 1\n}']

    def test_warn_prefix(self, console, lines):
        console.warn("careful")
        assert lines == ["WARN: careful"]

    def test_info_and_debug_like_log(self, console, lines):
        console.info("i")
        console.debug("d")
        assert lines == ["i", "d"]

    def test_log_returns_nothing(self, console):
        assert console.log("x") is None
