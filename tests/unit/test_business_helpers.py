# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for business address parsing."""

from schooldesk.domains.business import parse_address


class TestParseAddress:
    def test_full_address(self) -> None:
        address = parse_address("12 Elm St, Springfield, IL, 62704, US")

        assert address.street == "12 Elm St"
        assert address.city == "Springfield"
        assert address.state == "IL"
        assert address.zipcode == "62704"
        assert address.country == "US"

    def test_missing_parts_left_empty(self) -> None:
        address = parse_address("12 Elm St, Springfield")

        assert address.state == ""
        assert address.zipcode == ""
        assert address.country == "US"
