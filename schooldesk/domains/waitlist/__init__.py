# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist domain package."""

from schooldesk.domains.waitlist.service import (
    ClassNotFoundError,
    StudentNotFoundError,
    TermNotFoundError,
    WaitlistEntryNotFoundError,
    WaitlistService,
    WaitlistServiceError,
)

__all__ = [
    "ClassNotFoundError",
    "StudentNotFoundError",
    "TermNotFoundError",
    "WaitlistEntryNotFoundError",
    "WaitlistService",
    "WaitlistServiceError",
]
