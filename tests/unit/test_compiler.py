"""
Unit tests for the pattern compiler and CompiledCatalog.
"""
import json
import logging

import pytest

from src.config.constants import LINE_FIELDS, PARSER_VERSION, REQUIRED_FIELDS
from src.forward_parsing.compiler import (
    build_alternatives,
    compile_alternative,
    compile_catalog,
    get_default_catalog,
    load_catalog,
)
from src.models.errors import ConfigurationError
from src.models.pattern import PatternAlternative


class TestDefaultCatalog:
    """The built-in catalog compiles and keeps declaration order."""

    def test_all_required_fields_compiled(self, catalog):
        for name in REQUIRED_FIELDS:
            assert len(catalog.get(name)) >= 1

    def test_line_variants_only_for_line_fields(self, catalog):
        assert set(catalog.lines.keys()) == set(LINE_FIELDS)
        with pytest.raises(KeyError):
            catalog.line("mailbox")

    def test_order_preserved(self, catalog):
        indexes = [p.index for p in catalog.get("separator")]
        assert indexes == list(range(len(indexes)))

    def test_line_variant_wraps_whole_match(self, catalog):
        pattern = catalog.line("original_subject")[0]
        m = pattern.regex.search("From: a\nSubject: Hello\n")
        assert m.group(1) == "Subject: Hello"
        assert m.group(2) == " Hello"

    def test_line_variant_keeps_flags(self, catalog):
        # original_subject is case-insensitive and multiline
        pattern = catalog.line("original_subject")[0]
        assert pattern.regex.search("x\nSUBJECT: hi") is not None

    def test_default_catalog_is_cached(self):
        assert get_default_catalog() is get_default_catalog()

    def test_tables_are_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.inner["subject"] = ()

    def test_fields_in_catalog_order(self, catalog):
        assert catalog.fields[:3] == ("subject", "separator", "separator_with_information")
        assert set(REQUIRED_FIELDS) <= set(catalog.fields)

    def test_compile_summary_logged(self, catalog_data, caplog):
        with caplog.at_level(logging.INFO, logger="src.forward_parsing.compiler"):
            compile_catalog(catalog_data)
        assert PARSER_VERSION in caplog.text
        assert f"{len(catalog_data)} fields" in caplog.text


class TestPatternAlternative:
    def test_flagged_source(self):
        alt = PatternAlternative(field="f", index=0, source="^a(.+)", flags="im")
        assert alt.flagged_source == "(?im)^a(.+)"
        assert alt.line_source == "(?im)(^a(.+))"

    def test_no_flags(self):
        alt = PatternAlternative(field="f", index=0, source="a")
        assert alt.flagged_source == "a"
        assert alt.line_source == "(a)"


class TestConfigurationErrors:
    """Catalog defects are fatal at compile time."""

    def test_invalid_pattern(self, catalog_data):
        catalog_data["subject"] = [{"pattern": r"^Fwd:(.*", "flags": "m"}]
        with pytest.raises(ConfigurationError) as exc:
            compile_catalog(catalog_data)
        assert exc.value.field == "subject"
        assert exc.value.index == 0

    def test_backreference_rejected(self, catalog_data):
        # Backreferences need a backtracking engine
        catalog_data["separator"] = [{"pattern": r"^(-+)Forwarded\1$", "flags": "m"}]
        with pytest.raises(ConfigurationError):
            compile_catalog(catalog_data)

    def test_missing_required_field(self, catalog_data):
        del catalog_data["mailbox"]
        with pytest.raises(ConfigurationError, match="schema violation"):
            compile_catalog(catalog_data)

    def test_unknown_flag(self, catalog_data):
        catalog_data["subject"] = [{"pattern": r"^Fwd:(.*)", "flags": "x"}]
        with pytest.raises(ConfigurationError):
            compile_catalog(catalog_data)

    def test_empty_alternative_list(self, catalog_data):
        catalog_data["subject"] = []
        with pytest.raises(ConfigurationError):
            compile_catalog(catalog_data)

    def test_undeclared_named_group(self):
        alt = PatternAlternative(field="f", index=2, source=r"(?P<date>.+) wrote:")
        with pytest.raises(ConfigurationError, match="declared captures"):
            compile_alternative(alt)

    def test_declared_capture_missing_from_pattern(self):
        alt = PatternAlternative(field="f", index=0, source=r"(.+) wrote:", captures=("date",))
        with pytest.raises(ConfigurationError):
            compile_alternative(alt)

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestLoadCatalog:
    def test_empty_path_returns_builtin(self):
        from src.config.catalog import DEFAULT_PATTERN_CATALOG
        assert load_catalog("") is DEFAULT_PATTERN_CATALOG

    def test_load_from_file(self, tmp_path, catalog_data):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog_data), encoding="utf-8")
        loaded = load_catalog(str(path))
        assert loaded == catalog_data
        compiled = compile_catalog(loaded, version="custom")
        assert compiled.version == "custom"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="cannot load"):
            load_catalog(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_catalog(str(path))

    def test_build_alternatives_keeps_metadata(self):
        alts = build_alternatives({"f": [{"pattern": "a", "flags": "i", "client": "X", "captures": ["date"]}]})
        assert alts["f"][0] == PatternAlternative(
            field="f", index=0, source="a", flags="i", client="X", captures=("date",)
        )
