"""Generate JSON Schema and docs for the checkwise config file."""

from __future__ import annotations

import json
from pathlib import Path

from checkwise.config import CheckwiseConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _collect_refs(obj: object) -> set[str]:
    """Return all ``$defs`` names referenced via ``$ref`` inside *obj*."""
    refs: set[str] = set()
    if isinstance(obj, dict):
        if "$ref" in obj:
            ref = obj["$ref"]
            if ref.startswith("#/$defs/"):
                refs.add(ref.removeprefix("#/$defs/"))
        for v in obj.values():
            refs |= _collect_refs(v)
    elif isinstance(obj, list):
        for v in obj:
            refs |= _collect_refs(v)
    return refs


def _order_defs(defs: dict) -> dict:
    """Topologically sort ``$defs`` so referenced types precede referencing types."""
    ordered: dict[str, dict] = {}
    visited: set[str] = set()

    def _visit(name: str) -> None:
        if name in visited or name not in defs:
            return
        visited.add(name)
        for dep in _collect_refs(defs[name]):
            _visit(dep)
        ordered[name] = defs[name]

    for name in defs:
        _visit(name)
    return ordered


def generate_json_schema() -> dict:
    schema = CheckwiseConfig.model_json_schema()
    if "$defs" in schema:
        schema["$defs"] = _order_defs(schema["$defs"])
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def _ref_name(prop: dict) -> str:
    """Return the ``$defs`` name *prop* points at, or an empty string."""
    ref = prop.get("$ref")
    if ref is None and prop.get("allOf"):
        ref = prop["allOf"][0].get("$ref")
    return ref.removeprefix("#/$defs/") if ref else ""


def _describe_field(name: str, prop: dict, defs: dict) -> str:
    target = _ref_name(prop)
    if target:
        kind = defs.get(target, {}).get("type", "object")
        if "enum" in defs.get(target, {}):
            kind = "one of: " + ", ".join(defs[target]["enum"])
    else:
        kind = prop.get("type", "object")
    default = prop.get("default")
    if default is None or isinstance(default, dict):
        return f"- `{name}`: {kind}"
    return f"- `{name}`: {kind} (default: `{json.dumps(default)}`)"


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    defs = schema.get("$defs", {})

    lines: list[str] = []
    lines.append("# checkwise config schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Top-level keys")
    sections: list[tuple[str, dict]] = []
    for name, prop in schema.get("properties", {}).items():
        lines.append(_describe_field(name, prop, defs))
        target = _ref_name(prop)
        if "properties" in defs.get(target, {}):
            sections.append((name, defs[target]))

    for name, section in sections:
        lines.append("")
        lines.append(f"## `{name}`")
        for field_name, prop in section["properties"].items():
            lines.append(_describe_field(field_name, prop, defs))

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
