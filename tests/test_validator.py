"""
Tests for sysprop_generator.validation.property_validator.
"""
import pytest

from sysprop_generator.exceptions import ValidationError
from sysprop_generator.models.parsing.property_loader import load_property_set
from sysprop_generator.models.parsing.textproto_parser import parse_properties
from sysprop_generator.models.sysprop import Access, Owner, Property, PropertySet, PropType, Scope
from sysprop_generator.validation.property_validator import (
    check_properties,
    normalize_properties,
    validate_properties,
)


DUPLICATED_FIELD = """
owner: Vendor
module: "com.error.DuplicatedField"
prefix: "com.error"
prop {
    name: "dup"
    type: Integer
    scope: Internal
}
prop {
    name: "dup"
    type: Long
    scope: Public
}
"""

EMPTY_PROP = """
owner: Vendor
module: "com.google.EmptyProp"
prefix: ""
"""

INVALID_PROP_NAME = """
owner: Odm
module: "odm.invalid.prop.name"
prefix: "invalid"
prop {
    name: "!@#$"
    type: Integer
    scope: System
}
"""

EMPTY_ENUM_VALUES = """
owner: Odm
module: "test.manufacturer"
prefix: "test"
prop {
    name: "empty_enum_value"
    type: Enum
    scope: Internal
}
"""

DUPLICATED_ENUM_VALUE = """
owner: Vendor
module: "vendor.module.name"
prefix: ""
prop {
    name: "status"
    type: Enum
    enum_values: "on|off|intermediate|on"
    scope: Public
}
"""

INVALID_MODULE_NAME = """
owner: Platform
module: ""
prefix: ""
prop {
    name: "integer"
    type: Integer
    scope: Public
}
"""

INVALID_NAMESPACE_FOR_PLATFORM = """
owner: Platform
module: "android.os.PlatformProperties"
prefix: "vendor.buildprop"
prop {
    name: "utclong"
    type: Long
    scope: System
}
"""

INVALID_MODULE_NAME_FOR_PLATFORM = """
owner: Platform
module: "android.os.notPlatformProperties"
prefix: "android.os"
prop {
    name: "stringprop"
    type: String
    scope: Internal
}
"""

INVALID_MODULE_NAME_FOR_VENDOR_OR_ODM = """
owner: Vendor
module: "android.os.PlatformProperties"
prefix: "android.os"
prop {
    name: "init"
    type: Integer
    scope: System
}
"""

INVALID_CASES = [
    (DUPLICATED_FIELD, 'Duplicated prop name "dup"'),
    (EMPTY_PROP, "There is no defined property"),
    (INVALID_PROP_NAME, 'Invalid prop name "!@#$"'),
    (EMPTY_ENUM_VALUES, 'Invalid enum value "" for prop "empty_enum_value"'),
    (DUPLICATED_ENUM_VALUE, 'Duplicated enum value "on" for prop "status"'),
    (INVALID_MODULE_NAME, 'Invalid module name ""'),
    (INVALID_NAMESPACE_FOR_PLATFORM, 'Prop "utclong" owned by platform cannot have vendor. or odm. namespace'),
    (
        INVALID_MODULE_NAME_FOR_PLATFORM,
        'Platform-defined properties should have "android.os.PlatformProperties" as module name',
    ),
    (
        INVALID_MODULE_NAME_FOR_VENDOR_OR_ODM,
        'Vendor or Odm cannot use "android.os.PlatformProperties" as module name',
    ),
]


def _vendor_set(*properties, module="vendor.test.Props", prefix="vendor.test"):
    return PropertySet(owner=Owner.Vendor, module=module, prefix=prefix, properties=list(properties))


class TestInvalidSysprop:
    """Every rejected file reports exactly one message."""

    @pytest.mark.parametrize("content, expected", INVALID_CASES)
    def test_rejected_with_exact_message(self, content, expected):
        assert check_properties(parse_properties(content)) == expected

    @pytest.mark.parametrize("content, expected", INVALID_CASES)
    def test_loader_raises_validation_error(self, write_sysprop, content, expected):
        path = write_sysprop(content)
        with pytest.raises(ValidationError) as exc_info:
            load_property_set(path)
        assert str(exc_info.value) == expected

    @pytest.mark.parametrize("content, expected", INVALID_CASES)
    def test_validation_is_idempotent(self, content, expected):
        props = parse_properties(content)
        assert check_properties(props) == check_properties(props) == expected


class TestRuleOrdering:
    """Only the earliest violated rule is reported."""

    def test_module_before_prefix(self):
        props = _vendor_set(Property(name="x"), module="single", prefix="bad..prefix")
        assert check_properties(props) == 'Invalid module name "single"'

    def test_invalid_module_segment(self):
        props = _vendor_set(Property(name="x"), module="vendor.1bad.Props")
        assert check_properties(props) == 'Invalid name "1bad" in module'

    def test_prefix_before_empty_properties(self):
        props = _vendor_set(prefix="bad..prefix")
        assert check_properties(props) == 'Invalid prefix "bad..prefix"'

    def test_property_rules_before_uniqueness(self):
        props = _vendor_set(Property(name="dup"), Property(name="dup"), Property(name="bad-name"))
        assert check_properties(props) == 'Invalid prop name "bad-name"'

    def test_uniqueness_before_module_ownership(self):
        props = PropertySet(
            owner=Owner.Platform,
            module="android.os.Other",
            prefix="",
            properties=[Property(name="dup"), Property(name="dup")],
        )
        assert check_properties(props) == 'Duplicated prop name "dup"'

    def test_invalid_enum_value_before_duplicate(self):
        prop = Property(name="status", type=PropType.EnumList, enum_values="on|on|2bad")
        assert check_properties(_vendor_set(prop)) == 'Invalid enum value "2bad" for prop "status"'

    def test_odm_namespace_in_platform_name(self):
        props = PropertySet(
            owner=Owner.Platform,
            module="android.os.PlatformProperties",
            prefix="",
            properties=[Property(name="odm.thing")],
        )
        assert check_properties(props) == 'Prop "odm.thing" owned by platform cannot have vendor. or odm. namespace'


class TestNormalizationCollision:
    """Names colliding after dot-to-underscore normalization."""

    def test_dotted_and_underscored_names_collide(self):
        props = _vendor_set(Property(name="a.b"), Property(name="a_b"))
        assert check_properties(props) == 'Duplicated prop name "a_b"'

    def test_reverse_order_reports_later_name(self):
        props = _vendor_set(Property(name="a_b"), Property(name="a.b"))
        assert check_properties(props) == 'Duplicated prop name "a.b"'


class TestNormalizeProperties:
    """Filling in the default access mode."""

    def test_no_access_defaults_to_readonly(self):
        prop = Property(name="x")
        normalize_properties(_vendor_set(prop))
        assert prop.access == Access.Readonly
        assert prop.readonly is True
        assert prop.is_readonly

    def test_readonly_false_means_read_write(self):
        prop = Property(name="x", readonly=False)
        normalize_properties(_vendor_set(prop))
        assert prop.access == Access.ReadWrite
        assert prop.readonly is False

    def test_explicit_access_wins(self):
        prop = Property(name="x", access=Access.ReadWrite, readonly=True)
        normalize_properties(_vendor_set(prop))
        assert prop.access == Access.ReadWrite
        assert prop.readonly is False

    def test_writeonce_is_not_readonly(self):
        prop = Property(name="x", access=Access.Writeonce)
        normalize_properties(_vendor_set(prop))
        assert prop.access == Access.Writeonce
        assert prop.readonly is False

    def test_loaded_file_reports_readonly_downstream(self, valid_sysprop_file):
        props = load_property_set(valid_sysprop_file)
        by_name = {prop.name: prop for prop in props.properties}
        assert by_name["longlong"].access == Access.Readonly
        assert by_name["test_uint"].access == Access.ReadWrite


class TestValidSysprop:
    """A complete, valid file."""

    def test_valid_file_passes(self, valid_props):
        assert check_properties(valid_props) is None
        validate_properties(valid_props)

    def test_ir_matches_input(self, valid_sysprop_file):
        props = load_property_set(valid_sysprop_file)
        assert [prop.name for prop in props.properties] == [
            "test_double",
            "test_int",
            "test_string",
            "test_enum",
            "test_BOOLeaN",
            "longlong",
            "test_uint",
            "test_double_list",
            "test_list_int",
            "el",
        ]
        assert props.properties[3].enum_value_list == ["a", "b", "c", "D", "e", "f", "G"]
        assert props.properties[9].type == PropType.EnumList
        assert props.properties[1].scope == Scope.Public
