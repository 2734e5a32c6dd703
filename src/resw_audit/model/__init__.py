"""Enums shared across the engine and report layers."""

from __future__ import annotations

from enum import Enum


class FindingKind(str, Enum):
    """What a single reported line means."""

    UNUSED = "unused"
    MISSED = "missed"
    EXTRA = "extra"
