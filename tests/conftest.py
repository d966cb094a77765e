"""
pytest configuration and fixtures for sysprop generator tests.
"""
import logging
from pathlib import Path
from typing import Callable

import pytest

from sysprop_generator.models.parsing.textproto_parser import parse_properties


VALID_SYSPROP = """
owner: Vendor
module: "vendor.example.ExampleProperties"
prefix: "vendor.example"
prop {
    name: "test_double"
    type: Double
    scope: Internal
    access: ReadWrite
}
prop {
    name: "test_int"
    type: Integer
    scope: Public
    access: ReadWrite
}
prop {
    name: "test_string"
    type: String
    scope: System
    access: Writeonce
}
prop {
    name: "test_enum"
    type: Enum
    enum_values: "a|b|c|D|e|f|G"
    scope: Internal
    access: ReadWrite
}
prop {
    name: "test_BOOLeaN"
    type: Boolean
    scope: Public
    access: ReadWrite
    integer_as_bool: true
    deprecated: true
}
prop {
    name: "longlong"
    type: Long
    scope: Internal
    legacy_prop_name: "vendor.example.legacy_longlong"
}
prop {
    name: "test_uint"
    type: UInt
    scope: Internal
    readonly: false
}
prop {
    name: "test_double_list"
    type: DoubleList
    scope: Public
    access: ReadWrite
}
prop {
    name: "test_list_int"
    type: IntegerList
    scope: System
    access: ReadWrite
}
prop {
    name: "el"
    type: EnumList
    enum_values: "enu|mva|lue"
    scope: Internal
    access: ReadWrite
}
"""


@pytest.fixture
def valid_sysprop_text() -> str:
    """Text-format sysprop with 10 properties covering scalar, list and enum types."""
    return VALID_SYSPROP


@pytest.fixture
def write_sysprop(tmp_path: Path) -> Callable[..., Path]:
    """Return a function writing content to a sysprop file under tmp_path."""
    def _write(content: str, file_name: str = "Example.sysprop") -> Path:
        path = tmp_path / file_name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def valid_sysprop_file(write_sysprop, valid_sysprop_text) -> Path:
    return write_sysprop(valid_sysprop_text)


@pytest.fixture
def valid_props(valid_sysprop_text):
    """Parsed (not yet validated) property set of the valid sysprop file."""
    return parse_properties(valid_sysprop_text)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers and level installed by a CLI's logging setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
