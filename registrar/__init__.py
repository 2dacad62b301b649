"""Course registration service.

Manages course offerings, student enrollment, enrollment caps and
waiting lists on top of a relational store.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
