"""
Tests for the YAML form of sysprop files.
"""
import logging

import pytest

from sysprop_generator.exceptions import ParseError
from sysprop_generator.models.json_schema_loader import validate_against_schema
from sysprop_generator.models.parsing.property_loader import load_property_set, parse_property_file
from sysprop_generator.models.parsing.yaml_parser import parse_properties_yaml, yaml_parser
from sysprop_generator.models.sysprop import Access, Owner, PropType, Scope


VALID_YAML = """\
owner: Vendor
module: vendor.example.ExampleProperties
prefix: vendor.example
props:
  - name: timeout_ms
    type: Integer
    scope: Public
    access: ReadWrite
  - name: mode
    type: Enum
    enum_values: fast|slow
    legacy_prop_name: vendor.example.legacy_mode
"""


class TestParsePropertiesYaml:
    """Decoding YAML content."""

    def test_valid_yaml(self):
        props = parse_properties_yaml(VALID_YAML, "example.yaml")
        assert props.owner == Owner.Vendor
        assert props.module == "vendor.example.ExampleProperties"
        assert [prop.name for prop in props.properties] == ["timeout_ms", "mode"]

        timeout, mode = props.properties
        assert timeout.type == PropType.Integer
        assert timeout.scope == Scope.Public
        assert timeout.access == Access.ReadWrite
        assert mode.type == PropType.Enum
        assert mode.scope == Scope.Internal
        assert mode.access is None
        assert mode.legacy_prop_name == "vendor.example.legacy_mode"

    def test_malformed_yaml(self):
        with pytest.raises(ParseError, match="Error parsing file broken.yaml"):
            parse_properties_yaml("props: [unclosed", "broken.yaml")

    def test_schema_violation_is_logged_with_location(self, caplog):
        content = "module: a.B\nprops:\n  - name: x\n    type: Float\n"
        with caplog.at_level(logging.DEBUG, logger="sysprop_generator"):
            with pytest.raises(ParseError, match="Error parsing file bad.yaml"):
                parse_properties_yaml(content, "bad.yaml")
        assert "bad.yaml:4:11" in caplog.text
        assert "yaml_path=/props/0/type" in caplog.text

    def test_unknown_key_is_rejected(self):
        with pytest.raises(ParseError):
            parse_properties_yaml("module: a.B\nunknown: 1\n", "bad.yaml")


class TestSchema:
    """Bundled JSON schema checks."""

    def test_valid_data_has_no_issues(self):
        data, _ = yaml_parser.load_from_string_with_source(VALID_YAML)
        assert validate_against_schema(data) == []

    def test_non_mapping_root(self):
        issues = validate_against_schema(["not", "a", "mapping"])
        assert len(issues) == 1
        assert issues[0].yaml_path == ""

    def test_source_map_paths(self):
        _, source_map = yaml_parser.load_from_string_with_source(VALID_YAML)
        assert source_map["/props/1/name"] == {"line": 9, "column": 11}


class TestYamlFiles:
    """The loader picks the YAML form by file suffix."""

    def test_yaml_suffix(self, write_sysprop):
        path = write_sysprop(VALID_YAML, "Example.yaml")
        props = parse_property_file(path)
        assert props.module == "vendor.example.ExampleProperties"

    def test_yaml_file_is_validated_and_normalized(self, write_sysprop):
        path = write_sysprop(VALID_YAML, "Example.yml")
        props = load_property_set(path)
        assert props.properties[1].access == Access.Readonly
        assert props.properties[1].readonly is True
