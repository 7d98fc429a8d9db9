# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for datetime helpers."""

from datetime import date, datetime, timedelta, timezone

import pytest

from schooldesk.utils.datetime import calculate_age, ensure_utc, is_expired, utc_now


class TestEnsureUtc:
    def test_none_passes_through(self) -> None:
        assert ensure_utc(None) is None

    def test_naive_value_assumed_utc(self) -> None:
        """SQLite hands back naive datetimes; they are stored as UTC."""
        result = ensure_utc(datetime(2025, 1, 1, 12, 0))

        assert result == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_aware_value_converted(self) -> None:
        plus_two = timezone(timedelta(hours=2))

        result = ensure_utc(datetime(2025, 1, 1, 12, 0, tzinfo=plus_two))

        assert result == datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc


class TestIsExpired:
    def test_past_is_expired(self) -> None:
        assert is_expired(utc_now() - timedelta(seconds=1)) is True

    def test_future_is_not_expired(self) -> None:
        assert is_expired(utc_now() + timedelta(hours=1)) is False

    def test_missing_expiry_is_expired(self) -> None:
        assert is_expired(None) is True


class TestCalculateAge:
    @pytest.mark.parametrize(
        ("born", "today", "expected"),
        [
            (date(2015, 6, 1), date(2025, 5, 31), 9),
            (date(2015, 6, 1), date(2025, 6, 1), 10),
            (datetime(2012, 2, 29, 8, 0), date(2025, 2, 28), 12),
        ],
    )
    def test_whole_years(self, born, today, expected) -> None:
        assert calculate_age(born, today=today) == expected

    def test_unknown_birth_date(self) -> None:
        assert calculate_age(None) is None
