# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Rust accessor module (``mod.rs``) built on ``rustutils::system_properties``."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from ..file_io.output_writer import ensure_directory, write_generated_file
from ..file_io.template_renderer import TemplateRenderer
from ..models.parsing.property_loader import load_property_set
from ..models.sysprop import Property, PropertySet, PropType, Scope
from ..utils.naming import camel_to_snake, snake_to_camel
from .common import GENERATED_FILE_BANNER, common_property_data

logger = logging.getLogger(__name__)

_RUST_SCALAR_TYPES = {
    PropType.Boolean: "bool",
    PropType.Integer: "i32",
    PropType.UInt: "u32",
    PropType.Long: "i64",
    PropType.ULong: "u64",
    PropType.Double: "f64",
    PropType.String: "String",
}

_RUST_KEYWORDS = {"type"}


def get_rust_enum_type(prop: Property) -> str:
    return snake_to_camel(prop.identifier) + "Values"


def _element_type(prop: Property) -> str:
    element = prop.type.element_type
    if element == PropType.Enum:
        return get_rust_enum_type(prop)
    return _RUST_SCALAR_TYPES[element]


def get_rust_return_type(prop: Property) -> str:
    if prop.is_list:
        return f"Vec<{_element_type(prop)}>"
    return _element_type(prop)


def get_rust_accept_type(prop: Property) -> str:
    if prop.is_list:
        return f"&[{_element_type(prop)}]"
    if prop.type == PropType.String:
        return "&str"
    return _element_type(prop)


def get_type_parser(prop: Property) -> str:
    if prop.type == PropType.Boolean:
        return "parsers_formatters::parse_bool"
    if prop.type == PropType.BooleanList:
        return "parsers_formatters::parse_bool_list"
    if prop.is_list:
        return "parsers_formatters::parse_list"
    return "parsers_formatters::parse"


def get_type_formatter(prop: Property) -> str:
    if prop.type == PropType.Boolean:
        if prop.integer_as_bool:
            return "parsers_formatters::format_bool_as_int"
        return "parsers_formatters::format_bool"
    if prop.type == PropType.BooleanList:
        if prop.integer_as_bool:
            return "parsers_formatters::format_bool_list_as_int"
        return "parsers_formatters::format_bool_list"
    if prop.is_list:
        return "parsers_formatters::format_list"
    return "parsers_formatters::format"


def get_rust_prop_id(prop: Property) -> str:
    return camel_to_snake(prop.identifier)


def _property_data(props: PropertySet, prop: Property) -> Dict[str, Any]:
    data = common_property_data(props, prop)
    prop_id = get_rust_prop_id(prop)
    data["rust_id"] = prop_id
    # Getters named after a keyword need a raw identifier.
    data["getter_name"] = f"r#{prop_id}" if prop_id in _RUST_KEYWORDS else prop_id
    data["const_name"] = prop_id.upper() + "_PROP"
    data["enum_type"] = get_rust_enum_type(prop)
    data["enum_variants"] = [(value, snake_to_camel(value)) for value in data["enum_values"]]
    data["return_type"] = get_rust_return_type(prop)
    data["accept_type"] = get_rust_accept_type(prop)
    data["parser"] = get_type_parser(prop)
    data["formatter"] = get_type_formatter(prop)
    data["is_string"] = prop.type == PropType.String
    # Lists are already borrowed slices; scalars are borrowed for the formatter.
    data["format_arg"] = "v" if prop.is_list else "&v"
    return data


def generate_rust_source(props: PropertySet, scope: Scope = Scope.Internal) -> str:
    """Render ``mod.rs`` with the accessors of ``props`` visible at ``scope``."""
    renderer = TemplateRenderer()
    return renderer.render_template(
        "rust/mod.rs.jinja2",
        banner=GENERATED_FILE_BANNER,
        properties=[_property_data(props, prop) for prop in props.visible_properties(scope)],
    )


def generate_rust_library(
    input_file_path: str,
    rust_output_dir: str,
    scope: Scope = Scope.Internal,
) -> str:
    """Generate ``<rust_output_dir>/mod.rs`` for a sysprop file.

    Nothing is written unless the file parses and validates.

    Returns:
        The written path
    """
    props = load_property_set(input_file_path)

    logger.info(f"Generating Rust sysprop library for module: {props.module}")
    lib_result = generate_rust_source(props, scope)

    ensure_directory(rust_output_dir)
    lib_path = os.path.join(rust_output_dir, "mod.rs")
    return write_generated_file(lib_result, lib_path, "generated rust lib")
