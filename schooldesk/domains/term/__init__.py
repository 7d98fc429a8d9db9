# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Term domain package."""

from schooldesk.domains.term.service import TermNotFoundError, TermService, TermServiceError

__all__ = ["TermNotFoundError", "TermService", "TermServiceError"]
