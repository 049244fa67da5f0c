"""Timeout tiers and shared constants for browser waits (milliseconds)."""
from __future__ import annotations

import re

SHORT = 5_000
MEDIUM = 10_000
LONG = 15_000
VERY_LONG = 30_000

# Login-state probe; short because absence is an expected answer.
PROBE = 2_000

STRONG_PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]+$")
PASSWORD_LENGTH = 12

INVALID_LOGIN_MESSAGE = "Invalid login credentials. Please try again."
