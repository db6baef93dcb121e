"""
Tests for the schema registry and its pydantic models.
"""

import pytest
from ulticode_core.models.schema import PrimaryKey, SchemaMetadata
from ulticode_core.schema.registry import (
    ORDERING_RULES,
    SCHEMA_METADATA,
    TEMPORAL_ENTITIES,
    get_schema,
    load_schema_registry,
)


class TestDefaultRegistry:
    """Test the bundled registry."""

    def test_problems_rules(self):
        """Test a scalar numeric primary key with enums and required fields."""
        schema = SCHEMA_METADATA["problems"]

        assert schema.primary_key.field == "id"
        assert schema.primary_key.type == "number"
        assert schema.primary_key.auto_increment is True
        assert not schema.primary_key.is_composite
        assert schema.enums["difficulty"] == ("Easy", "Medium", "Hard")
        assert "slug" in schema.required_fields

    def test_junction_table_has_composite_key(self):
        """Test that comma-joined key fields are split into parts."""
        pk = SCHEMA_METADATA["problem_tag_relations"].primary_key

        assert pk.is_composite
        assert pk.field_names == ("problem_id", "tag_id")

    def test_foreign_keys_and_unique_constraints(self):
        """Test relationship rules on problem_details."""
        schema = SCHEMA_METADATA["problem_details"]

        assert [(fk.field, fk.references.entity, fk.references.field) for fk in schema.foreign_keys] == [
            ("problem_id", "problems", "id")
        ]
        assert schema.unique_constraints == ("problem_id",)
        assert set(schema.json_fields) == {"companies", "constraints_json"}

    def test_self_reference(self):
        """Test that forum_comments.parent_id references forum_comments."""
        fks = {fk.field: fk.references for fk in SCHEMA_METADATA["forum_comments"].foreign_keys}

        assert fks["parent_id"].entity == "forum_comments"
        assert fks["parent_id"].field == "id"

    def test_registry_is_read_only(self):
        """Test that the registry mapping cannot be modified."""
        with pytest.raises(TypeError):
            SCHEMA_METADATA["problems"] = SCHEMA_METADATA["problem_tags"]  # type: ignore[index]

    def test_get_schema(self):
        """Test lookup by entity name."""
        assert get_schema("problems") is SCHEMA_METADATA["problems"]
        assert get_schema("no_such_entity") is None

    def test_ordering_and_temporal_rules(self):
        """Test the ordering and temporal rule tables."""
        assert ORDERING_RULES["problem_approach_steps"] == ("step_order", "approach_id")
        assert ORDERING_RULES["problem_examples"] == ("example_order", "problem_id")
        assert ORDERING_RULES["problem_list_groups"].group_by is None
        assert TEMPORAL_ENTITIES == ("solution_metas",)


class TestLoadSchemaRegistry:
    """Test loading alternative registries from YAML."""

    def test_happy_path(self, tmp_path):
        """Test camelCase keys and a null enums block."""
        registry_file = tmp_path / "registry.yaml"
        registry_file.write_text(
            """
widgets:
  primaryKey: {field: id, type: string}
  foreignKeys:
    - {field: owner_id, references: {entity: owners, field: id}}
  enums: null
  requiredFields: [id, owner_id]
"""
        )

        registry = load_schema_registry(registry_file)

        widgets = registry["widgets"]
        assert widgets.primary_key.type == "string"
        assert widgets.enums == {}
        assert widgets.required_fields == ("id", "owner_id")
        assert widgets.json_fields == ()
        assert get_schema("widgets", registry) is widgets
        assert get_schema("problems", registry) is None

    def test_invalid_key_type(self, tmp_path):
        """Test that unsupported key types are rejected with the file path."""
        registry_file = tmp_path / "bad.yaml"
        registry_file.write_text("widgets:\n  primaryKey: {field: id, type: uuid}\n")

        with pytest.raises(ValueError, match="Invalid structure"):
            load_schema_registry(registry_file)

    def test_missing_primary_key(self, tmp_path):
        """Test that every entity must declare a primary key."""
        registry_file = tmp_path / "bad.yaml"
        registry_file.write_text("widgets:\n  requiredFields: [id]\n")

        with pytest.raises(ValueError, match="bad.yaml"):
            load_schema_registry(registry_file)


class TestSchemaMetadata:
    """Test model helpers."""

    def test_populate_by_field_name(self):
        """Test construction with python field names instead of aliases."""
        schema = SchemaMetadata(primary_key=PrimaryKey(field="id", type="number"), required_fields=("id",))

        assert schema.primary_key.auto_increment is False
        assert schema.required_fields == ("id",)

    def test_rule_classes(self):
        """Test the labels reported for each constraint class."""
        assert SCHEMA_METADATA["problem_tags"].rule_classes() == ["primary key", "required"]
        assert SCHEMA_METADATA["problem_tag_relations"].rule_classes() == [
            "composite key",
            "foreign keys",
            "required",
        ]
        assert SCHEMA_METADATA["problem_details"].rule_classes() == [
            "primary key",
            "foreign keys",
            "required",
            "json",
            "one-to-one",
        ]
