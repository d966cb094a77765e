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

"""C++ accessor library: one header and one source per sysprop file."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from ..file_io.output_writer import ensure_directory, write_generated_file
from ..file_io.template_renderer import TemplateRenderer
from ..models.parsing.property_loader import load_property_set
from ..models.sysprop import Property, PropertySet, PropType, Scope
from .common import GENERATED_FILE_BANNER, common_property_data, output_basename

logger = logging.getLogger(__name__)

_CPP_SCALAR_TYPES = {
    PropType.Boolean: "bool",
    PropType.Integer: "std::int32_t",
    PropType.UInt: "std::uint32_t",
    PropType.Long: "std::int64_t",
    PropType.ULong: "std::uint64_t",
    PropType.Double: "double",
    PropType.String: "std::string",
}


def get_cpp_enum_name(prop: Property) -> str:
    return prop.identifier + "_values"


def get_cpp_prop_type_name(prop: Property) -> str:
    element = prop.type.element_type
    element_name = get_cpp_enum_name(prop) if element == PropType.Enum else _CPP_SCALAR_TYPES[element]
    if prop.is_list:
        return f"std::vector<{element_name}>"
    return element_name


def get_cpp_namespace(props: PropertySet) -> str:
    return props.module.replace(".", "::")


def get_header_include_guard_name(props: PropertySet) -> str:
    return "SYSPROPGEN_" + props.module.replace(".", "_") + "_H_"


def _format_expression(prop: Property) -> str:
    if prop.type == PropType.String:
        return "value"
    if prop.integer_as_bool and prop.type in (PropType.Boolean, PropType.BooleanList):
        return "FormatValueAsInt(value)"
    return "FormatValue(value)"


def _property_data(props: PropertySet, prop: Property) -> Dict[str, Any]:
    data = common_property_data(props, prop)
    data["cpp_type"] = get_cpp_prop_type_name(prop)
    data["enum_name"] = get_cpp_enum_name(prop)
    data["format_expression"] = _format_expression(prop)
    return data


def _template_data(props: PropertySet, scope: Scope) -> Dict[str, Any]:
    return {
        "banner": GENERATED_FILE_BANNER,
        "namespace": get_cpp_namespace(props),
        "include_guard": get_header_include_guard_name(props),
        "properties": [_property_data(props, prop) for prop in props.visible_properties(scope)],
    }


def generate_header(props: PropertySet, scope: Scope = Scope.Internal) -> str:
    """Render the C++ header declaring the accessors of ``props``."""
    renderer = TemplateRenderer()
    return renderer.render_template("cpp/header.h.jinja2", **_template_data(props, scope))


def generate_source(props: PropertySet, include_name: str, scope: Scope = Scope.Internal) -> str:
    """Render the C++ source defining the accessors of ``props``.

    Args:
        props: Validated property set
        include_name: Header path used in the ``#include`` line
        scope: Visibility of the generated library
    """
    renderer = TemplateRenderer()
    return renderer.render_template(
        "cpp/source.cpp.jinja2",
        include_name=include_name,
        **_template_data(props, scope),
    )


def generate_cpp_files(
    input_file_path: str,
    header_output_dir: str,
    source_output_dir: str,
    include_name: Optional[str] = None,
    scope: Scope = Scope.Internal,
) -> Tuple[str, str]:
    """Generate ``<basename>.h`` and ``<basename>.cpp`` for a sysprop file.

    Nothing is written unless the file parses and validates.

    Returns:
        (header path, source path)
    """
    props = load_property_set(input_file_path)

    basename = output_basename(input_file_path)
    if include_name is None:
        include_name = basename + ".h"

    logger.info(f"Generating C++ sysprop library for module: {props.module}")
    header_result = generate_header(props, scope)
    source_result = generate_source(props, include_name, scope)

    header_path = os.path.join(header_output_dir, basename + ".h")
    source_path = os.path.join(source_output_dir, basename + ".cpp")

    ensure_directory(header_output_dir)
    ensure_directory(source_output_dir)

    write_generated_file(header_result, header_path, "generated header")
    write_generated_file(source_result, source_path, "generated source")

    return header_path, source_path
