"""Tests for the plain-text report sink."""

from __future__ import annotations

import io
from pathlib import Path

from resw_audit.errors import CatalogReadError
from resw_audit.model.results import AuditResult, LocaleDiff
from resw_audit.reports.text import format_locale_diff, format_unused, write_text_report


def test_format_unused():
    assert format_unused(["A", "B"]) == ["Unused line: A", "Unused line: B"]


def test_format_locale_diff():
    diff = LocaleDiff(path=Path("de/R.resw"), missed=("B",), extra=("C", "D"), untranslated=1)
    assert format_locale_diff(diff).splitlines() == [
        f"Name: {Path('de/R.resw')}",
        "  Missed line: B",
        "  Extra line: C",
        "  Extra line: D",
        "  Untranslated lines: 1",
    ]


def test_clean_locale_still_reports_count():
    diff = LocaleDiff(path=Path("de.resw"))
    assert format_locale_diff(diff).splitlines()[1:] == ["  Untranslated lines: 0"]


def test_failed_locale_block():
    err = CatalogReadError(Path("it.resw"), "No such file or directory")
    text = format_locale_diff(LocaleDiff(path=Path("it.resw"), error=err))
    assert text.splitlines() == [
        "Name: it.resw",
        "  Error: cannot read catalog: it.resw: No such file or directory",
    ]


def test_blank_separator_between_reports():
    result = AuditResult(
        reference_file=Path("en.resw"),
        reference_keys=("A",),
        unused=["A"],
        locales=[LocaleDiff(path=Path("de.resw"))],
    )
    buf = io.StringIO()
    write_text_report(result, buf)
    assert buf.getvalue() == (
        "Unused line: A\n"
        "\n"
        "Name: de.resw\n"
        "  Untranslated lines: 0\n"
    )


def test_single_report_has_no_separator():
    result = AuditResult(reference_file=Path("en.resw"), reference_keys=(), unused=[])
    buf = io.StringIO()
    write_text_report(result, buf)
    assert buf.getvalue() == ""
