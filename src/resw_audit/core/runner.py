"""Runner — loads the reference catalog once and drives both reports."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor

from resw_audit.core.aggregate import collect_used_keys
from resw_audit.core.catalog import load_reference_keys
from resw_audit.core.config import AuditConfig
from resw_audit.core.discover import iter_locale_files, iter_source_files
from resw_audit.model.results import AuditResult, LocaleDiff, UsageResult
from resw_audit.reports.locale_diff import diff_locale_files
from resw_audit.reports.unused import find_unused_keys

_logger = logging.getLogger(__name__)


def _run_usage(config: AuditConfig) -> UsageResult:
    started = time.perf_counter()
    files = list(
        iter_source_files(
            config.source_paths(),
            config.source_extensions,
            ignore_files=config.ignore_files,
            ignore_dirs=config.ignore_dirs,
        )
    )
    usage = collect_used_keys(files, workers=config.workers, fail_fast=config.fail_fast)
    _logger.info(
        "Usage scan: %d files, %d candidate keys in %.2fs",
        usage.files_scanned,
        len(usage.used_keys),
        time.perf_counter() - started,
    )
    return usage


def _run_locales(config: AuditConfig, reference: tuple[str, ...]) -> list[LocaleDiff]:
    started = time.perf_counter()
    paths = list(
        iter_locale_files(
            config.lines_path(),
            config.reference_path(),
            extension=config.locale_extension,
        )
    )
    diffs = diff_locale_files(
        reference,
        paths,
        exempt_keys=config.exempt_keys,
        untranslated_prefix=config.untranslated_prefix,
        workers=config.workers,
        fail_fast=config.fail_fast,
    )
    _logger.info(
        "Locale diff: %d files in %.2fs", len(diffs), time.perf_counter() - started
    )
    return diffs


def run_audit(
    config: AuditConfig,
    *,
    unused: bool = True,
    locales: bool = True,
) -> AuditResult:
    """Execute the requested reports for *config* and assemble an ``AuditResult``.

    Raises ``ConfigurationError`` for invalid paths and ``CatalogReadError`` /
    ``CatalogParseError`` when the reference catalog cannot be loaded; both
    abort the whole run.
    """
    config.validate()

    # ── 1. reference catalog (fatal on failure) ─────────────────────
    reference = load_reference_keys(config.reference_path())

    result = AuditResult(
        reference_file=config.reference_path(),
        reference_keys=reference,
        config=config.describe(),
    )

    # ── 2. both reports, concurrently ───────────────────────────────
    with ThreadPoolExecutor(max_workers=2) as pool:
        usage_future = pool.submit(_run_usage, config) if unused else None
        locales_future = pool.submit(_run_locales, config, reference) if locales else None

        if usage_future is not None:
            result.usage = usage_future.result()
            result.unused = find_unused_keys(reference, result.usage.used_keys)
        if locales_future is not None:
            result.locales = locales_future.result()

    return result
