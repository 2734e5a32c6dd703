"""Tests for bundled schema loading and validation."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from resw_audit.contracts import load
from resw_audit.contracts.load import load_schema, validate_file, validate_instance

SCHEMA = "audit_result.schema.json"


def _minimal_result() -> dict:
    return {
        "schema_version": "audit_result_v1",
        "tool_version": "0.1.0",
        "config": {},
        "reference": {"path": "en-US/Resources.resw", "key_count": 0},
        "errors": [],
    }


class TestLoadSchema:
    def test_bundled_schema(self):
        schema = load_schema(SCHEMA)
        assert schema["$id"] == SCHEMA

    def test_package_resource_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        # No schema beside this fake module location, so the package data is read.
        monkeypatch.setattr(load, "__file__", str(tmp_path / "pkg" / "contracts" / "load.py"))
        assert load_schema(SCHEMA) == json.loads(
            (Path(load.__spec__.origin).parents[1] / load.SCHEMA_DIR / SCHEMA).read_text(
                encoding="utf-8"
            )
        )

    def test_unknown_schema(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(load, "__file__", str(tmp_path / "pkg" / "contracts" / "load.py"))
        with pytest.raises(FileNotFoundError):
            load_schema("missing.schema.json")


class TestValidate:
    def test_rejects_unknown_top_level_key(self):
        bad = {**_minimal_result(), "surprise": True}
        with pytest.raises(jsonschema.ValidationError):
            validate_instance(bad, SCHEMA)

    def test_rejects_wrong_schema_version(self):
        bad = {**_minimal_result(), "schema_version": "audit_result_v0"}
        with pytest.raises(jsonschema.ValidationError):
            validate_instance(bad, SCHEMA)

    def test_validate_file(self, tmp_path: Path):
        path = tmp_path / "result.json"
        path.write_text(json.dumps({"schema_version": "audit_result_v1"}), encoding="utf-8")
        with pytest.raises(jsonschema.ValidationError):
            validate_file(path, SCHEMA)
