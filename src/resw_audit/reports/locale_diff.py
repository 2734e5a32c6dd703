"""Locale diff — compare each locale document with the reference keys."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import AbstractSet, Mapping, Sequence

from resw_audit.core.aggregate import default_workers
from resw_audit.core.catalog import load_locale_records
from resw_audit.core.config import DEFAULT_UNTRANSLATED_PREFIX
from resw_audit.errors import AuditError
from resw_audit.model.results import LocaleDiff, LocaleRecord

logger = logging.getLogger(__name__)


def diff_locale(
    path: Path,
    reference: Sequence[str],
    records: Mapping[str, LocaleRecord],
    *,
    exempt_keys: AbstractSet[str] = frozenset(),
    untranslated_prefix: str = DEFAULT_UNTRANSLATED_PREFIX,
) -> LocaleDiff:
    """Reconcile one locale file's *records* against *reference*.

    ``missed`` follows reference order and ``extra`` follows file order.
    Exempt keys are never reported as missed.
    """
    reference_set = frozenset(reference)
    missed = tuple(
        key
        for key in dict.fromkeys(reference)
        if key not in records and key not in exempt_keys
    )
    extra = tuple(name for name in records if name not in reference_set)
    untranslated = sum(
        1 for rec in records.values() if rec.is_untranslated(untranslated_prefix)
    )
    return LocaleDiff(path=path, missed=missed, extra=extra, untranslated=untranslated)


def _diff_file(
    path: Path,
    reference: Sequence[str],
    *,
    exempt_keys: AbstractSet[str],
    untranslated_prefix: str,
    fail_fast: bool,
) -> LocaleDiff:
    try:
        records = load_locale_records(path)
    except AuditError as exc:
        if fail_fast:
            raise
        logger.warning("Locale file skipped: %s", exc)
        return LocaleDiff(path=path, error=exc)
    return diff_locale(
        path,
        reference,
        records,
        exempt_keys=exempt_keys,
        untranslated_prefix=untranslated_prefix,
    )


def diff_locale_files(
    reference: Sequence[str],
    paths: Sequence[Path],
    *,
    exempt_keys: AbstractSet[str] = frozenset(),
    untranslated_prefix: str = DEFAULT_UNTRANSLATED_PREFIX,
    workers: int | None = None,
    fail_fast: bool = False,
) -> list[LocaleDiff]:
    """Diff every locale file in parallel.

    Results are returned in completion order.  A file that cannot be read
    or parsed yields a ``LocaleDiff`` carrying the error unless *fail_fast*
    is set, in which case the error propagates.
    """
    paths = list(paths)
    if not paths:
        return []

    results: list[LocaleDiff] = []
    with ThreadPoolExecutor(max_workers=min(workers or default_workers(), len(paths))) as pool:
        futures = [
            pool.submit(
                _diff_file,
                path,
                reference,
                exempt_keys=exempt_keys,
                untranslated_prefix=untranslated_prefix,
                fail_fast=fail_fast,
            )
            for path in paths
        ]
        for future in as_completed(futures):
            results.append(future.result())
    return results
