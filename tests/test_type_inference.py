"""Tests for type_inference module."""

import pytest

from league_onboarding.inference.type_inference import (
    InferredType,
    classify_column,
    classify_value,
)


class TestClassifyValue:
    """Tests for classify_value function."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-01-15", InferredType.DATE),
            ("a@b.com", InferredType.EMAIL),
            ("https://x.com", InferredType.URL),
            ("42", InferredType.NUMBER),
            ("", InferredType.NULL),
            ("hello", InferredType.STRING),
        ],
    )
    def test_reference_values(self, value, expected) -> None:
        assert classify_value(value) == expected

    def test_none_is_null(self) -> None:
        assert classify_value(None) == InferredType.NULL

    def test_native_boolean_before_number(self) -> None:
        """bool subclasses int but must classify as boolean."""
        assert classify_value(True) == InferredType.BOOLEAN
        assert classify_value(False) == InferredType.BOOLEAN

    def test_boolean_strings_are_strings(self) -> None:
        assert classify_value("true") == InferredType.STRING

    def test_numeric_strings(self) -> None:
        assert classify_value("3.14") == InferredType.NUMBER
        assert classify_value("-7") == InferredType.NUMBER
        assert classify_value("1e3") == InferredType.NUMBER
        assert classify_value(" 12 ") == InferredType.NUMBER

    def test_native_numbers(self) -> None:
        assert classify_value(7) == InferredType.NUMBER
        assert classify_value(2.5) == InferredType.NUMBER

    def test_non_finite_is_not_number(self) -> None:
        assert classify_value("Infinity") == InferredType.STRING
        assert classify_value("nan") == InferredType.STRING
        assert classify_value(float("inf")) == InferredType.UNKNOWN

    def test_int_beyond_float_range_is_unknown(self) -> None:
        assert classify_value(10 ** 400) == InferredType.UNKNOWN

    def test_whitespace_only_is_string(self) -> None:
        assert classify_value("   ") == InferredType.STRING

    def test_underscore_digits_are_strings(self) -> None:
        assert classify_value("1_000") == InferredType.STRING

    def test_date_is_prefix_match(self) -> None:
        assert classify_value("2024-01-15T10:30:00Z") == InferredType.DATE
        assert classify_value("12/25/2024") == InferredType.DATE
        assert classify_value("12/25/24") == InferredType.STRING

    def test_date_wins_over_email_and_url(self) -> None:
        assert classify_value("2024-01-15 a@b.com") == InferredType.DATE

    def test_email_requires_domain_dot(self) -> None:
        assert classify_value("user@localhost") == InferredType.STRING
        assert classify_value("a b@c.com") == InferredType.STRING

    def test_url_requires_http_scheme(self) -> None:
        assert classify_value("http://example.org/path") == InferredType.URL
        assert classify_value("ftp://example.org") == InferredType.STRING

    def test_structures(self) -> None:
        assert classify_value([1, 2]) == InferredType.ARRAY
        assert classify_value({"a": 1}) == InferredType.OBJECT

    def test_unknown(self) -> None:
        assert classify_value(object()) == InferredType.UNKNOWN

    def test_enum_values_are_labels(self) -> None:
        assert InferredType.EMAIL.value == "email"
        assert InferredType.NUMBER == "number"


class TestClassifyColumn:
    """Tests for classify_column function."""

    def test_majority_vote(self) -> None:
        assert classify_column(["1", "2", "abc"]) == InferredType.NUMBER

    def test_tie_goes_to_first_encountered(self) -> None:
        assert classify_column(["abc", "1"]) == InferredType.STRING
        assert classify_column(["1", "abc"]) == InferredType.NUMBER

    def test_tie_is_not_alphabetical(self) -> None:
        values = ["https://a.io", "a@b.com", "https://b.io", "c@d.com"]
        assert classify_column(values) == InferredType.URL

    def test_none_values_are_skipped(self) -> None:
        assert classify_column([None, None, "x@y.org"]) == InferredType.EMAIL

    def test_empty_strings_count_as_null(self) -> None:
        assert classify_column(["", "", "5"]) == InferredType.NULL

    def test_empty_column_is_null(self) -> None:
        assert classify_column([]) == InferredType.NULL
        assert classify_column([None]) == InferredType.NULL

    def test_accepts_generators(self) -> None:
        assert classify_column(str(i) for i in range(3)) == InferredType.NUMBER
