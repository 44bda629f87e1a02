"""Tests for the bundled validators and the shared ValueValidator behaviour."""

from __future__ import annotations

from datetime import date, datetime
from unittest.mock import MagicMock, call

import pytest

from formvalidator.models.validation import Validation
from formvalidator.validators import (
    CountComparison,
    CountValidator,
    DateValidator,
    InlineValidator,
    PrefixValidator,
    Validatable,
    trimmed,
)


# ── CountValidator ──


def test_count_equals_matches_exact_length():
    """A count-equals(5) validator accepts "hello" and rejects "hi"."""
    validator = CountValidator(5, CountComparison.EQUALS, message="Need 5 characters")

    validator.value = "hello"
    assert validator.validate() == Validation.success()

    validator.value = "hi"
    assert validator.validate() == Validation.failure("Need 5 characters")


def test_count_ignores_surrounding_whitespace():
    validator = CountValidator(5, value="  hello \t")
    assert validator.validate().is_success


def test_count_keeps_trailing_newline():
    """A newline is not trimmed, so it counts towards the length."""
    validator = CountValidator(5, value="hello\n")
    assert not validator.validate().is_success

    validator.value = "hell\n"
    assert validator.validate().is_success


@pytest.mark.parametrize(
    "comparison, value, expected",
    [
        (CountComparison.LESS_THAN, "abc", False),
        (CountComparison.LESS_THAN, "ab", True),
        (CountComparison.LESS_THAN_OR_EQUALS, "abc", True),
        (CountComparison.GREATER_THAN, "abc", False),
        (CountComparison.GREATER_THAN, "abcd", True),
        (CountComparison.GREATER_THAN_OR_EQUALS, "abc", True),
        ("greater_than_or_equals", "ab", False),
    ],
)
def test_count_comparisons(comparison, value, expected):
    validator = CountValidator(3, comparison, value=value)
    assert validator.validate().is_success is expected


def test_count_comparison_phrases():
    assert CountComparison.EQUALS.phrase == "equal to"
    assert CountComparison.LESS_THAN_OR_EQUALS.phrase == "less than or equal to"
    assert CountComparison.GREATER_THAN.phrase == "greater than"


# ── PrefixValidator ──


def test_prefix_ignores_case_by_default():
    validator = PrefixValidator("Mr", ignore_case=True, message="Must start with Mr")

    validator.value = "mr. smith"
    assert validator.validate().is_success

    validator.value = "Ms. Smith"
    assert validator.validate() == Validation.failure("Must start with Mr")


def test_prefix_case_sensitive():
    validator = PrefixValidator("Mr", ignore_case=False, value="mr. smith")
    assert not validator.validate().is_success

    validator.value = "Mr. Smith"
    assert validator.validate().is_success


def test_empty_prefix_accepts_anything():
    assert PrefixValidator("", value="").validate().is_success


# ── InlineValidator ──


def test_inline_uses_condition():
    validator = InlineValidator(lambda value: "@" in value, message="Not an email")

    validator.value = "ada@example.com"
    assert validator.validate().is_success

    validator.value = "ada"
    assert validator.validate().message == "Not an email"


def test_message_producer_is_called_at_validation_time():
    messages = iter(["first", "second"])
    validator = InlineValidator(lambda value: False, message=lambda: next(messages))

    assert validator.validate().message == "first"
    assert validator.validate().message == "second"


# ── DateValidator ──


def test_date_must_fall_strictly_inside_range():
    validator = DateValidator(before=date(2021, 12, 31), after=date(2021, 1, 1), message="Out of range")

    validator.value = date(2021, 6, 1)
    assert validator.validate().is_success

    validator.value = date(2021, 1, 1)
    assert validator.validate() == Validation.failure("Out of range")

    validator.value = date(2021, 12, 31)
    assert not validator.validate().is_success


def test_date_works_with_datetimes():
    validator = DateValidator(
        before=datetime(2021, 1, 1, 12, 0),
        after=datetime(2021, 1, 1, 8, 0),
        value=datetime(2021, 1, 1, 9, 30),
    )
    assert validator.validate().is_success


def test_unset_date_is_empty_and_invalid():
    validator = DateValidator(before=date(2022, 1, 1), after=date(2020, 1, 1))
    assert validator.is_empty
    assert not validator.validate().is_success

    validator.value = date(2023, 1, 1)
    assert not validator.is_empty


# ── Shared behaviour ──


def test_bundled_validators_satisfy_the_protocol():
    for validator in (
        CountValidator(1),
        PrefixValidator("a"),
        InlineValidator(bool),
        DateValidator(before=date(2022, 1, 1), after=date(2020, 1, 1)),
    ):
        assert isinstance(validator, Validatable)


def test_is_empty_reflects_value_only():
    validator = CountValidator(3, value="abcdef")
    assert not validator.is_empty
    assert not validator.validate().is_success

    validator.value = ""
    assert validator.is_empty

    # Whitespace is content, even though the count check trims it
    validator.value = "   "
    assert not validator.is_empty


def test_all_change_listeners_run_in_registration_order():
    validator = PrefixValidator("Mr")
    listener = MagicMock()
    validator.observe_change(lambda v: listener("first", v))
    validator.observe_change(lambda v: listener("second", v))

    validator.value = "Mr Bean"

    assert listener.call_args_list == [
        call("first", Validation.success()),
        call("second", Validation.success()),
    ]


def test_assigning_equal_value_does_not_notify():
    validator = PrefixValidator("Mr", value="Mr X")
    listener = MagicMock()
    validator.observe_change(listener)

    validator.value = "Mr X"

    listener.assert_not_called()


def test_latest_validation_tracks_changes():
    validator = PrefixValidator("Mr", message="bad")
    validator.value = "Ms"
    assert validator.latest_validation == Validation.failure("bad")


def test_trigger_validation_surfaces_error_when_allowed():
    validator = PrefixValidator("Mr", value="Ms", message="bad")
    display = MagicMock()
    validator.observe_display(display)

    validator.trigger_validation(is_disabled=False, should_show_error=True)

    assert validator.shown_error == "bad"
    display.assert_called_once_with(Validation.failure("bad"))


def test_trigger_validation_silent_leaves_display_untouched():
    validator = PrefixValidator("Mr", value="Ms", message="bad")
    validator.trigger_validation(is_disabled=False, should_show_error=False)

    assert validator.shown_error is None
    assert validator.latest_validation == Validation.failure("bad")


def test_trigger_validation_disabled_clears_shown_error():
    validator = PrefixValidator("Mr", value="Ms", message="bad")
    validator.trigger_validation(is_disabled=False, should_show_error=True)
    assert validator.shown_error == "bad"

    validator.trigger_validation(is_disabled=True, should_show_error=True)

    assert validator.shown_error is None


def test_trimmed_strips_spaces_and_tabs_only():
    assert trimmed(" \ta b \t") == "a b"
    assert trimmed("  a b \n") == "a b \n"
