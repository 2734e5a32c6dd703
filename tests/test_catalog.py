"""Tests for the .resw catalog loaders."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from resw_audit.core.catalog import (
    load_locale_records,
    load_reference_keys,
    read_document,
)
from resw_audit.errors import AuditError, CatalogParseError, CatalogReadError
from resw_audit.model.results import LocaleRecord

_DOC = textwrap.dedent("""\
    <?xml version="1.0" encoding="utf-8"?>
    <root>
      <data name="A" xml:space="preserve">
        <value>Alpha</value>
      </data>
      <data name="B" xml:space="preserve">
        <value>Beta</value>
        <comment>Check translation</comment>
      </data>
      <data name="C" xml:space="preserve">
        <value>Gamma</value>
        <comment>Reviewed by Check team</comment>
      </data>
    </root>
""")


def _write(tmp_path: Path, text: str, name: str = "Resources.resw") -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


class TestReadDocument:
    def test_bom_prefixed_document_parses_identically(self, tmp_path: Path):
        plain = _write(tmp_path, _DOC, "plain.resw")
        bom = _write(tmp_path, "\ufeff" + _DOC, "bom.resw")

        assert load_reference_keys(bom) == load_reference_keys(plain)
        assert load_locale_records(bom) == load_locale_records(plain)
        assert read_document(bom).tag == "root"

    def test_missing_file_raises_read_error(self, tmp_path: Path):
        with pytest.raises(CatalogReadError) as exc_info:
            read_document(tmp_path / "nope.resw")
        assert exc_info.value.path == tmp_path / "nope.resw"
        assert "nope.resw" in str(exc_info.value)

    def test_undecodable_file_raises_read_error(self, tmp_path: Path):
        p = tmp_path / "latin1.resw"
        p.write_bytes(b"<root><data name='\xe9'/></root>")
        with pytest.raises(CatalogReadError):
            read_document(p)

    def test_malformed_xml_raises_parse_error(self, tmp_path: Path):
        p = _write(tmp_path, "<root><data name='A'><value>x</data></root>")
        with pytest.raises(CatalogParseError) as exc_info:
            read_document(p)
        assert isinstance(exc_info.value, AuditError)
        assert "not well-formed" in exc_info.value.reason


class TestLoadReferenceKeys:
    def test_document_order(self, tmp_path: Path):
        assert load_reference_keys(_write(tmp_path, _DOC)) == ("A", "B", "C")

    def test_duplicates_are_kept(self, tmp_path: Path):
        doc = "<root><data name='A'/><data name='B'/><data name='A'/></root>"
        assert load_reference_keys(_write(tmp_path, doc)) == ("A", "B", "A")

    def test_only_direct_data_children(self, tmp_path: Path):
        doc = (
            "<root>"
            "<resheader name='resmimetype'><value>text/microsoft-resx</value></resheader>"
            "<data name='A'/>"
            "</root>"
        )
        assert load_reference_keys(_write(tmp_path, doc)) == ("A",)

    def test_missing_name_attribute_is_parse_error(self, tmp_path: Path):
        doc = "<root><data><value>x</value></data></root>"
        with pytest.raises(CatalogParseError) as exc_info:
            load_reference_keys(_write(tmp_path, doc))
        assert "name" in exc_info.value.reason


class TestLoadLocaleRecords:
    def test_records_with_comments(self, tmp_path: Path):
        records = load_locale_records(_write(tmp_path, _DOC))
        assert list(records) == ["A", "B", "C"]
        assert records["A"] == LocaleRecord(name="A", comment=None)
        assert records["B"].comment == "Check translation"

    def test_untranslated_prefix_is_literal_and_case_sensitive(self, tmp_path: Path):
        records = load_locale_records(_write(tmp_path, _DOC))
        assert not records["A"].is_untranslated()
        assert records["B"].is_untranslated()
        assert not records["C"].is_untranslated()
        assert not LocaleRecord("D", "check later").is_untranslated()

    def test_empty_comment_is_not_untranslated(self, tmp_path: Path):
        doc = "<root><data name='A'><comment/></data></root>"
        records = load_locale_records(_write(tmp_path, doc))
        assert records["A"].comment == ""
        assert not records["A"].is_untranslated()

    def test_last_duplicate_wins(self, tmp_path: Path):
        doc = (
            "<root>"
            "<data name='A'><comment>first</comment></data>"
            "<data name='A'><comment>Check second</comment></data>"
            "</root>"
        )
        records = load_locale_records(_write(tmp_path, doc))
        assert len(records) == 1
        assert records["A"].comment == "Check second"
