"""
Tests for timestamp and numeric field normalization.
"""
from datetime import datetime, timedelta, timezone

import pytest

from fittrack.core.normalize import month_key, normalize_timestamp, to_number


class StoreTimestamp:
    """Mimics a store-native timestamp object."""

    def __init__(self, seconds, nanoseconds=0):
        self.seconds = seconds
        self.nanoseconds = nanoseconds


EXPECTED = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "raw",
    [
        {"seconds": 1700000000, "nanoseconds": 0},
        {"_seconds": 1700000000},
        StoreTimestamp(1700000000),
        "2023-11-14T22:13:20Z",
        "2023-11-14T22:13:20+00:00",
        "2023-11-14T23:13:20+01:00",
        "2023-11-14T22:13:20",
        1700000000000,
        datetime(2023, 11, 14, 22, 13, 20),
        datetime(2023, 11, 14, 17, 13, 20, tzinfo=timezone(timedelta(hours=-5))),
    ],
)
def test_timestamp_forms_resolve_to_same_instant(raw):
    assert normalize_timestamp(raw) == EXPECTED


def test_seconds_wrapper_and_iso_string_share_month():
    wrapped = normalize_timestamp({"seconds": 1700000000})
    iso = normalize_timestamp("2023-11-14T22:13:20.000Z")

    assert month_key(wrapped) == month_key(iso) == "2023-11"


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "not a date", "2024-13-45", {"nanoseconds": 5}, {"seconds": "abc"}, True, object(), 1e20],
)
def test_unresolvable_timestamps_are_none(raw):
    assert normalize_timestamp(raw) is None


def test_month_key_is_zero_padded():
    assert month_key(datetime(2024, 3, 1, tzinfo=timezone.utc)) == "2024-03"
    assert month_key(datetime(2024, 12, 31, tzinfo=timezone.utc)) == "2024-12"
    assert month_key(datetime(999, 1, 1, tzinfo=timezone.utc)) == "0999-01"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (30, 30),
        (12.5, 12.5),
        ("45", 45),
        ("7.5", 7.5),
        (None, 0),
        ("", 0),
        ("abc", 0),
        (float("nan"), 0),
        (True, 0),
        ([1, 2], 0),
        (float("inf"), 0),
        (float("-inf"), 0),
        ("Infinity", 0),
        ("-inf", 0),
        ("nan", 0),
        ("1e999", 0),
        (10 ** 400, 0),
        ("1e3", 1000),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected
