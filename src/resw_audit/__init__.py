"""resw_audit — find unused, missing and untranslated .resw localization keys."""

__all__ = [
    "__version__",
    "audit_project",
    "run_audit",
    "AuditConfig",
    "extract_keys",
]
__version__ = "0.1.0"

from resw_audit.api import audit_project  # noqa: E402
from resw_audit.core.config import AuditConfig  # noqa: E402
from resw_audit.core.extract import extract_keys  # noqa: E402
from resw_audit.core.runner import run_audit  # noqa: E402
