"""
Unit Tests for the Union Dispatcher.

Test Aspects Covered:
    ✅ Business Logic: Object discriminants, base type and literal buckets
    ✅ Edge Cases: Ambiguous discriminants, catch-alls, absent keys,
                  nested unions, bool vs int literals
    ✅ Error Handling: invalid_union wrapping, unwrapped single failures,
                      invalid_type / invalid_literal without invoking options
    ✅ Performance: Non-selected alternatives are never invoked
"""

from __future__ import annotations

import logging
from unittest.mock import Mock

import pytest

from shapecheck import (
    Schema,
    ValidationError,
    bigint,
    literal,
    nothing,
    number,
    object_,
    string,
    union,
    unknown,
)


def error_of(schema: Schema, value) -> ValidationError:
    """Parse value and return the raised error."""
    with pytest.raises(ValidationError) as exc_info:
        schema.parse(value)
    return exc_info.value


class TestObjectDiscrimination:
    """Test cases for dispatch on a discriminant key."""

    def test_selects_alternative_without_invoking_others(self) -> None:
        """
        SCENARIO: {kind: "a", x: 1} against {kind:"a", x} | {kind:"b", y}
        EXPECTED: First alternative selected, second never runs its check
        """
        # Arrange
        spy = Mock(return_value=True)
        schema = union(
            object_({"kind": literal("a"), "x": number()}),
            object_({"kind": literal("b"), "y": string().assert_(spy)}),
        )
        value = {"kind": "a", "x": 1}

        # Act
        result = schema.parse(value)

        # Assert
        assert result is value
        spy.assert_not_called()

    def test_second_alternative_selected(self) -> None:
        spy = Mock(return_value=True)
        schema = union(
            object_({"kind": literal("a"), "x": number().assert_(spy)}),
            object_({"kind": literal("b"), "y": string()}),
        )

        assert schema.parse({"kind": "b", "y": "s"}) == {"kind": "b", "y": "s"}
        spy.assert_not_called()

    def test_selected_failure_is_unwrapped(self, event_schema: Schema) -> None:
        """
        SCENARIO: Discriminant selects an alternative that then fails
        EXPECTED: Its issue surfaces directly, not as invalid_union
        """
        error = error_of(event_schema, {"kind": "a", "x": "no"})

        assert error.issues[0].code == "invalid_type"
        assert error.issues[0].path == ["x"]
        assert error.issues[0].expected == ["number"]

    def test_unknown_discriminant_value(self, event_schema: Schema) -> None:
        """
        SCENARIO: Discriminant value matches no alternative
        EXPECTED: invalid_literal at the key listing accepted values
        """
        error = error_of(event_schema, {"kind": "c"})

        assert error.issues[0].code == "invalid_literal"
        assert error.issues[0].path == ["kind"]
        assert error.issues[0].expected == ["a", "b"]
        assert error.message == 'invalid_literal at .kind (expected "a" or "b")'

    def test_wrong_discriminant_type(self, event_schema: Schema) -> None:
        error = error_of(event_schema, {"kind": 1})

        assert error.issues[0].code == "invalid_type"
        assert error.issues[0].path == ["kind"]
        assert error.issues[0].expected == ["string"]

    def test_missing_discriminant(self, event_schema: Schema) -> None:
        error = error_of(event_schema, {"x": 1})

        assert error.issues[0].code == "missing_key"
        assert error.issues[0].key == "kind"

    def test_non_object_value(self, event_schema: Schema) -> None:
        error = error_of(event_schema, "a")

        assert error.issues[0].code == "invalid_type"
        assert error.issues[0].expected == ["object"]

    def test_absent_discriminant_goes_to_tolerant_alternative(self) -> None:
        """
        SCENARIO: One alternative makes the discriminant optional
        EXPECTED: Objects without the key are validated by that alternative
        """
        schema = union(
            object_({"kind": literal("a").optional(), "x": number()}),
            object_({"kind": literal("b"), "y": string()}),
        )
        value = {"x": 1}

        assert schema.parse(value) is value
        assert error_of(schema, {"y": "s"}).issues[0].key == "x"

    def test_nested_union_at_discriminant(self) -> None:
        schema = union(
            object_({"t": union(literal("a"), literal("b")), "v": number()}),
            object_({"t": literal("c"), "v": string()}),
        )

        assert schema.parse({"t": "b", "v": 1}) == {"t": "b", "v": 1}
        error = error_of(schema, {"t": "c", "v": 1})
        assert error.issues[0].path == ["v"]
        assert error.issues[0].expected == ["string"]

    def test_discriminant_by_base_type(self) -> None:
        schema = union(
            object_({"id": number(), "n": number()}),
            object_({"id": string(), "s": string()}),
        )

        assert schema.parse({"id": "x", "s": "y"}) == {"id": "x", "s": "y"}
        assert error_of(schema, {"id": 1, "s": "y"}).issues[0].key == "n"

    def test_first_valid_key_is_discriminant(self) -> None:
        """
        SCENARIO: First common key is shared, second tells alternatives apart
        EXPECTED: Dispatch on the second key
        """
        spy = Mock(return_value=True)
        schema = union(
            object_({"v": number(), "type": literal("x")}),
            object_({"v": number().assert_(spy), "type": literal("y")}),
        )

        schema.parse({"v": 1, "type": "x"})

        spy.assert_not_called()

    def test_transform_on_alternative(self) -> None:
        schema = union(
            object_({"kind": literal("a")}).apply(lambda o: "A"),
            object_({"kind": literal("b")}).apply(lambda o: "B"),
        )

        assert schema.parse({"kind": "b"}) == "B"


class TestAmbiguousAlternatives:
    """Test cases for alternatives sharing a bucket."""

    @pytest.fixture
    def ambiguous(self) -> Schema:
        return union(
            object_({"kind": literal("a"), "x": number()}),
            object_({"kind": literal("a"), "y": string()}),
        )

    def test_all_fail_wraps_invalid_union(self, ambiguous: Schema) -> None:
        """
        SCENARIO: Both alternatives share kind "a" and both fail
        EXPECTED: First issue is invalid_union wrapping both failures
        """
        # Act
        error = error_of(ambiguous, {"kind": "a"})

        # Assert
        issue = error.issues[0]
        assert issue.code == "invalid_union"
        assert [sub.code for sub in issue.issues] == ["missing_key", "missing_key"]
        assert [sub.key for sub in issue.issues] == ["x", "y"]
        assert error.message == "invalid_union at . (validation failed)"

    def test_second_alternative_succeeds(self, ambiguous: Schema) -> None:
        value = {"kind": "a", "y": "s"}

        assert ambiguous.parse(value) is value

    def test_first_success_wins(self) -> None:
        """
        SCENARIO: Both alternatives accept the value
        EXPECTED: The first declared one produces the result
        """
        second = Mock(return_value="second")
        schema = union(number().apply(lambda n: "first"), number().apply(second))

        assert schema.parse(1) == "first"
        second.assert_not_called()

    def test_nested_union_issues_have_absolute_paths(self, ambiguous: Schema) -> None:
        error = error_of(object_({"e": ambiguous}), {"e": {"kind": "a"}})

        issue = error.issues[0]
        assert issue.path == ["e"]
        assert [sub.path for sub in issue.issues] == [["e"], ["e"]]

    def test_two_absent_tolerant_alternatives_fall_back_to_trial(self) -> None:
        schema = union(
            object_({"k": literal("a").optional(), "x": number()}),
            object_({"k": literal("b").optional(), "y": string()}),
        )
        value = {"y": "s"}

        assert schema.parse(value) is value


class TestBaseTypeDiscrimination:
    """Test cases for dispatch on the value's own type."""

    def test_unmatched_type_invokes_nothing(self) -> None:
        """
        SCENARIO: Value type accepted by no alternative
        EXPECTED: invalid_type listing all expected types, no option run
        """
        spy_a = Mock(return_value=True)
        spy_b = Mock(return_value=True)
        schema = union(string().assert_(spy_a), number().assert_(spy_b))

        error = error_of(schema, True)

        assert error.issues[0].code == "invalid_type"
        assert error.issues[0].expected == ["string", "number"]
        spy_a.assert_not_called()
        spy_b.assert_not_called()

    def test_literal_union(self) -> None:
        schema = union(literal("a"), literal("b"))

        assert schema.parse("b") == "b"
        assert error_of(schema, "c").issues[0].expected == ["a", "b"]
        assert error_of(schema, 1).issues[0].expected == ["string"]

    def test_literal_merged_into_type_bucket(self) -> None:
        """
        SCENARIO: literal("a") | string-with-check share the string bucket
        EXPECTED: Tried in declaration order; both failing gives invalid_union
        """
        schema = union(literal("a"), string().assert_(lambda s: s.startswith("x")))

        assert schema.parse("a") == "a"
        assert schema.parse("xy") == "xy"
        assert error_of(schema, "b").issues[0].code == "invalid_union"

    def test_bool_and_int_literals_distinct(self) -> None:
        schema = union(literal(1), literal(True))

        assert schema.parse(True) is True
        assert schema.parse(1) == 1
        assert error_of(schema, 2).issues[0].expected == [1, True]

    def test_bigint_and_number_share_bucket(self) -> None:
        schema = union(bigint(), number().apply(lambda n: "float"))

        assert schema.parse(3) == 3
        assert schema.parse(2.5) == "float"

    def test_nested_unions_compose(self) -> None:
        schema = union(union(literal("a"), literal("b")), literal("c"))

        assert schema.parse("b") == "b"
        assert error_of(schema, "d").issues[0].expected == ["a", "b", "c"]

    def test_empty_union(self) -> None:
        error = error_of(union(), 1)

        assert error.issues[0].expected == []
        assert error.message == "invalid_type at . (expected nothing)"


class TestCatchAlls:
    """Test cases for unknown and nothing alternatives."""

    def test_unknown_catches_unmatched_types(self) -> None:
        assert union(number(), unknown()).parse("x") == "x"

    def test_single_failing_catch_all_unwrapped(self) -> None:
        schema = union(literal("a"), unknown().assert_(lambda v: False, "nope"))

        error = error_of(schema, "b")

        assert error.issues[0].code == "custom_error"
        assert error.message == "custom_error at . (nope)"

    def test_root_unknown_disables_object_discrimination(self) -> None:
        value = {"kind": "zzz"}

        assert union(object_({"kind": literal("a")}), unknown()).parse(value) is value

    def test_nothing_alternative_makes_field_optional(self) -> None:
        """
        SCENARIO: Field typed string | nothing
        EXPECTED: Absent key accepted, present value must be a string
        """
        schema = object_({"v": union(string(), nothing())})
        value: dict = {}

        assert schema.parse(value) is value
        error = error_of(schema, {"v": 1})
        assert error.issues[0].path == ["v"]
        assert error.issues[0].expected == ["string"]


class TestDispatchLogging:
    """Test cases for compile-time strategy logging."""

    def test_logs_discriminant_key(self, event_schema: Schema, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="shapecheck")

        event_schema.func

        assert "dispatches on key 'kind'" in caplog.text

    def test_logs_base_type_strategy(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="shapecheck")

        union(string(), number()).func

        assert "dispatches on base type" in caplog.text
