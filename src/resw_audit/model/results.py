"""Result dataclasses produced by the engine and consumed by report sinks."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from resw_audit import __version__
from resw_audit.errors import AuditError


@dataclass(frozen=True, slots=True)
class LocaleRecord:
    """One ``<data>`` entry of a locale document."""

    name: str
    comment: str | None = None

    def is_untranslated(self, prefix: str = "Check") -> bool:
        """True when the comment marks the entry as still pending translation."""
        return self.comment is not None and self.comment.startswith(prefix)


@dataclass(frozen=True, slots=True)
class UsageResult:
    """Outcome of scanning the source tree for key references."""

    used_keys: frozenset[str]
    files_scanned: int = 0
    errors: tuple[AuditError, ...] = ()


@dataclass(frozen=True, slots=True)
class LocaleDiff:
    """Reconciliation of one locale file against the reference keys.

    When the file could not be loaded, ``error`` is set and the finding
    lists are empty.
    """

    path: Path
    missed: tuple[str, ...] = ()
    extra: tuple[str, ...] = ()
    untranslated: int = 0
    error: AuditError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_findings(self) -> bool:
        return bool(self.missed or self.extra)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "path": self.path.as_posix(),
            "missed": list(self.missed),
            "extra": list(self.extra),
            "untranslated": self.untranslated,
        }
        if self.error is not None:
            d["error"] = str(self.error)
        return d


@dataclass(slots=True)
class AuditResult:
    """Everything one audit run produced.

    ``unused`` is ``None`` when the unused-key report was not requested;
    likewise ``locales`` for the locale diff report.
    """

    reference_file: Path
    reference_keys: tuple[str, ...]
    unused: list[str] | None = None
    usage: UsageResult | None = None
    locales: list[LocaleDiff] | None = None
    config: dict[str, Any] = field(default_factory=dict)
    tool_version: str = __version__

    @property
    def errors(self) -> list[AuditError]:
        """Per-file failures isolated during the run."""
        out: list[AuditError] = []
        if self.usage is not None:
            out.extend(self.usage.errors)
        for diff in self.locales or []:
            if diff.error is not None:
                out.append(diff.error)
        return out

    @property
    def has_findings(self) -> bool:
        if self.unused:
            return True
        return any(d.has_findings for d in self.locales or [])

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly form matching ``audit_result.schema.json``."""
        d: dict[str, Any] = {
            "schema_version": "audit_result_v1",
            "tool_version": self.tool_version,
            "config": dict(self.config),
            "reference": {
                "path": self.reference_file.as_posix(),
                "key_count": len(self.reference_keys),
            },
            "errors": [
                {
                    "kind": type(e).__name__,
                    "path": e.path.as_posix() if e.path is not None else None,
                    "reason": e.reason,
                }
                for e in sorted(self.errors, key=lambda e: (str(e.path), e.reason))
            ],
        }
        if self.unused is not None:
            d["unused"] = list(self.unused)
        if self.usage is not None:
            d["usage"] = {
                "files_scanned": self.usage.files_scanned,
                "used_key_count": len(self.usage.used_keys),
            }
        if self.locales is not None:
            # Completion order is arbitrary; sort for stable artifacts.
            d["locales"] = [
                diff.to_dict()
                for diff in sorted(self.locales, key=lambda x: x.path.as_posix())
            ]
        return d
