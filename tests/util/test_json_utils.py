"""Tests for json_utils module."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolscope.util.json_utils import JSONSchema, json


class TestJSONSchema:
    """Tests for JSONSchema class."""

    def test_valid_empty_schema(self) -> None:
        """Empty dict is a valid JSON schema."""
        schema = JSONSchema({})
        assert schema == {}

    def test_valid_tool_input_schema(self) -> None:
        """A typical tool input schema is valid and keeps its content."""
        schema = JSONSchema({
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "properties": {
                "departurePort": {"type": "string", "description": "Departure port"},
                "date": {"type": "string"},
            },
            "required": ["departurePort"],
        })
        assert schema["required"] == ["departurePort"]

    def test_invalid_type_raises(self) -> None:
        """Invalid type value raises TypeError."""
        with pytest.raises(TypeError, match="Invalid JSON Schema"):
            JSONSchema({"type": "not-a-real-type"})

    def test_non_dict_raises(self) -> None:
        """Non-dict input raises TypeError."""
        with pytest.raises(TypeError, match="must be a dict"):
            JSONSchema("not a dict")

        with pytest.raises(TypeError, match="must be a dict"):
            JSONSchema(None)

    def test_invalid_property_schema_raises(self) -> None:
        """Invalid nested schema raises TypeError."""
        with pytest.raises(TypeError, match="Invalid JSON Schema"):
            JSONSchema({
                "type": "object",
                "properties": {"port": {"type": "invalid-type"}},
            })

    def test_schema_supports_deepcopy(self) -> None:
        """JSONSchema can be deepcopied."""
        import copy

        original = JSONSchema({
            "type": "object",
            "properties": {"name": {"type": "string"}},
        })
        copied = copy.deepcopy(original)

        assert copied == original
        assert copied is not original
        assert isinstance(copied, JSONSchema)


class TestJson:
    """Tests for the json wrapper."""

    def test_load_reads_file(self, tmp_path: Path) -> None:
        """load() parses a JSON file."""
        path = tmp_path / "tools.json"
        path.write_text('[{"id": "a"}]', encoding="utf-8")

        assert json.load(path) == [{"id": "a"}]

    def test_load_invalid_json_raises(self, tmp_path: Path) -> None:
        """Malformed files raise json.JSONDecodeError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            json.load(str(path))

