"""Plain-text report sink.

Layout::

    Unused line: OldKey
    <blank>
    Name: Strings/de-DE/Resources.resw
      Missed line: NewKey
      Extra line: StaleKey
      Untranslated lines: 3
"""

from __future__ import annotations

from typing import IO, Iterable

from resw_audit.model import FindingKind
from resw_audit.model.results import AuditResult, LocaleDiff

_LABELS = {
    FindingKind.UNUSED: "Unused line",
    FindingKind.MISSED: "Missed line",
    FindingKind.EXTRA: "Extra line",
}


def format_unused(keys: Iterable[str]) -> list[str]:
    return [f"{_LABELS[FindingKind.UNUSED]}: {key}" for key in keys]


def format_locale_diff(diff: LocaleDiff) -> str:
    lines = [f"Name: {diff.path}"]
    if diff.error is not None:
        lines.append(f"  Error: {diff.error}")
        return "\n".join(lines)
    lines.extend(f"  {_LABELS[FindingKind.MISSED]}: {key}" for key in diff.missed)
    lines.extend(f"  {_LABELS[FindingKind.EXTRA]}: {key}" for key in diff.extra)
    lines.append(f"  Untranslated lines: {diff.untranslated}")
    return "\n".join(lines)


def write_text_report(result: AuditResult, fp: IO[str]) -> None:
    """Write *result* to *fp* in the line-oriented layout above.

    Locale blocks are written in the order the engine produced them.
    """
    if result.unused is not None:
        for line in format_unused(result.unused):
            fp.write(line + "\n")
    if result.unused is not None and result.locales is not None:
        fp.write("\n")
    for diff in result.locales or []:
        fp.write(format_locale_diff(diff) + "\n")
