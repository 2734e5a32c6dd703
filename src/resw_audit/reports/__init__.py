"""Report builders and sinks."""

from resw_audit.reports.locale_diff import diff_locale, diff_locale_files
from resw_audit.reports.text import write_text_report
from resw_audit.reports.unused import find_unused_keys

__all__ = [
    "diff_locale",
    "diff_locale_files",
    "find_unused_keys",
    "write_text_report",
]
