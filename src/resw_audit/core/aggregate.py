"""Usage aggregation — collect every candidate key referenced in a source tree.

Files are split into one partition per worker.  Each worker accumulates its
own set and the caller performs a single sequential reduce, so no lock is
held while extracting.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

from resw_audit.core.extract import extract_keys
from resw_audit.errors import FileReadError
from resw_audit.model.results import UsageResult

logger = logging.getLogger(__name__)


def default_workers() -> int:
    """Same sizing rule as ``ThreadPoolExecutor``'s own default."""
    return min(32, (os.cpu_count() or 1) + 4)


def read_source(path: Path) -> str:
    """Return the full text of *path*; undecodable bytes are replaced."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc


def _scan_partition(
    paths: Sequence[Path], *, fail_fast: bool
) -> tuple[set[str], list[FileReadError]]:
    keys: set[str] = set()
    errors: list[FileReadError] = []
    for path in paths:
        try:
            text = read_source(path)
        except FileReadError as exc:
            if fail_fast:
                raise
            logger.warning("Skipping %s", exc)
            errors.append(exc)
            continue
        if not text:
            continue
        keys |= extract_keys(text)
    return keys, errors


def collect_used_keys(
    files: Sequence[Path],
    *,
    workers: int | None = None,
    fail_fast: bool = False,
) -> UsageResult:
    """Extract keys from every file in *files* in parallel and merge them.

    Unreadable files are recorded in ``UsageResult.errors``; with
    *fail_fast* the first ``FileReadError`` propagates instead.
    """
    files = list(files)
    n = max(1, min(workers or default_workers(), len(files) or 1))
    partitions = [files[i::n] for i in range(n)]
    logger.info("Scanning %d source files with %d workers", len(files), n)

    used: set[str] = set()
    errors: list[FileReadError] = []
    with ThreadPoolExecutor(max_workers=n) as pool:
        futures = [
            pool.submit(_scan_partition, part, fail_fast=fail_fast)
            for part in partitions
        ]
        for future in futures:
            keys, part_errors = future.result()
            used |= keys
            errors.extend(part_errors)

    return UsageResult(
        used_keys=frozenset(used),
        files_scanned=len(files) - len(errors),
        errors=tuple(errors),
    )
