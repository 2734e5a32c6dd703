"""Load and validate JSON instances against bundled schemas.

Usage::

    from resw_audit.contracts.load import validate_instance, validate_file

    validate_instance(result.to_dict(), "audit_result.schema.json")
    validate_file(Path("audit.json"), "audit_result.schema.json")
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def _read_schema_text(name: str) -> str:
    """Read a bundled schema.

    Priority:
    1. ``src/resw_audit/data/schemas/`` relative to this file
    2. pip-installed package data via importlib.resources
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical.read_text(encoding="utf-8")

    # as_file may extract to a temporary file that is removed on exit.
    with resources.as_file(resources.files("resw_audit") / SCHEMA_DIR / name) as p:
        return p.read_text(encoding="utf-8")


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    return json.loads(_read_schema_text(name))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)


def validate_file(instance_path: Path, schema_name: str) -> None:
    """Load a JSON file and validate it against the named schema."""
    instance = json.loads(instance_path.read_text(encoding="utf-8"))
    validate_instance(instance, schema_name)
