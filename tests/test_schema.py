"""Tests for config schema generation."""

import json

from checkwise.schema import generate_json_schema, generate_schema_doc, write_json_schema, write_schema_doc


def test_schema_lists_sections():
    schema = generate_json_schema()
    assert set(schema["properties"]) == {"log_level", "diff", "files", "output"}
    assert {"DiffConfig", "FilesConfig", "OutputConfig", "LogLevel"} <= set(schema["$defs"])


def test_schema_doc_mentions_every_field():
    doc = generate_schema_doc()
    assert doc.startswith("# checkwise config schema")
    for name in ("log_level", "max_mismatches", "color", "chunk_size", "max_repr_length"):
        assert f"`{name}`" in doc
    assert "## `diff`" in doc
    assert "one of: debug, info, warning, error" in doc


def test_write_schema_files(tmp_path):
    out = tmp_path / "nested" / "schema.json"
    doc = tmp_path / "docs" / "schema.md"
    write_json_schema(out)
    write_schema_doc(doc)
    assert json.loads(out.read_text())["title"] == "CheckwiseConfig"
    assert doc.read_text().startswith("# checkwise")
