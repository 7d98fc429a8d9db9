# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waiver policy domain package."""

from schooldesk.domains.waiver_policy.service import (
    WaiverPolicyNotFoundError,
    WaiverPolicyService,
    WaiverPolicyServiceError,
)

__all__ = ["WaiverPolicyNotFoundError", "WaiverPolicyService", "WaiverPolicyServiceError"]
