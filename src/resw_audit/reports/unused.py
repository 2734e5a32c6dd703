"""Unused-key reconciliation."""

from __future__ import annotations

from typing import AbstractSet, Iterable


def find_unused_keys(reference: Iterable[str], used: AbstractSet[str]) -> list[str]:
    """Return reference keys absent from *used*, in reference order.

    A key duplicated in the reference is reported at most once.
    """
    unused: list[str] = []
    seen: set[str] = set()
    for key in reference:
        if key in seen:
            continue
        seen.add(key)
        if key not in used:
            unused.append(key)
    return unused
