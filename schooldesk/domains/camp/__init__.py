# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Camp domain package."""

from schooldesk.domains.camp.service import CampNotFoundError, CampService, CampServiceError

__all__ = ["CampNotFoundError", "CampService", "CampServiceError"]
