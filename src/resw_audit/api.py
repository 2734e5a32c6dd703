"""
resw_audit.api
==============

Programmatic entrypoints for using resw_audit from other tools.

Goals:
  - No argparse / CLI dependencies
  - Results as dataclasses plus a schema-checked JSON-friendly dict

Usage::

    from resw_audit.api import audit_project

    result, result_dict = audit_project({
        "root": "path/to/app",
        "source_folders": ["App", "App.Core"],
        "lines_folder": "App.Core/Strings",
        "reference_file": "en-US/Resources.resw",
    })
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from resw_audit.contracts.load import validate_instance
from resw_audit.core.config import AuditConfig
from resw_audit.core.runner import run_audit
from resw_audit.model.results import AuditResult

RESULT_SCHEMA = "audit_result.schema.json"


def load_config(source: AuditConfig | Mapping[str, Any] | str | Path) -> AuditConfig:
    """Accept a ready config, a mapping, or the path of a YAML config file."""
    if isinstance(source, AuditConfig):
        return source
    if isinstance(source, Mapping):
        return AuditConfig.from_mapping(source)
    return AuditConfig.from_yaml(Path(source))


def audit_project(
    config: AuditConfig | Mapping[str, Any] | str | Path,
    *,
    unused: bool = True,
    locales: bool = True,
) -> tuple[AuditResult, dict[str, Any]]:
    """Run the audit and return ``(AuditResult, result_dict)``.

    Raises
    ------
    ConfigurationError
        If a configured path does not exist.
    CatalogReadError, CatalogParseError
        If the reference catalog cannot be loaded.
    """
    result = run_audit(load_config(config), unused=unused, locales=locales)
    result_dict = result.to_dict()
    validate_instance(result_dict, RESULT_SCHEMA)
    return result, result_dict
