"""Error taxonomy for the audit engine.

Every error carries the offending ``path`` and a human ``reason`` so the CLI
can print one line that identifies both.

  AuditError
  ├── ConfigurationError   invalid or missing configured paths
  ├── CatalogReadError     I/O failure reading a .resw document
  ├── CatalogParseError    malformed document structure
  └── FileReadError        I/O failure reading a scanned source file
"""

from __future__ import annotations

from pathlib import Path


class AuditError(Exception):
    """Base class for every failure raised by resw_audit."""

    kind: str = "audit error"

    def __init__(self, path: str | Path | None, reason: str) -> None:
        self.path = Path(path) if path is not None else None
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.path is None:
            return f"{self.kind}: {self.reason}"
        return f"{self.kind}: {self.path}: {self.reason}"


class ConfigurationError(AuditError):
    kind = "configuration error"


class CatalogReadError(AuditError):
    kind = "cannot read catalog"


class CatalogParseError(AuditError):
    kind = "malformed catalog"


class FileReadError(AuditError):
    kind = "cannot read source file"
