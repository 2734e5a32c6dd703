"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — audit completed (findings are informational)
  1   Violation — findings or per-file errors present and ``--strict`` given
  2   Error — usage error, invalid configuration, unreadable reference catalog
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
