"""SchoolDesk Backend.

Multi-tenant scheduling and billing backend for class, camp and lesson
providers: families, students, terms, enrollments, discounts and platform
commissions.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
