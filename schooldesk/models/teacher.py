# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Teacher schemas embedded in class responses."""

from schooldesk.models.common import ORMModel


class TeacherSummary(ORMModel):
    id: int
    name: str
    email: str | None = None
    phone: str | None = None
