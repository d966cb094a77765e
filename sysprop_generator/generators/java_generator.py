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

"""Java accessor class plus the JNI library it loads."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from ..file_io.output_writer import ensure_directory, write_generated_file
from ..file_io.template_renderer import TemplateRenderer
from ..models.parsing.property_loader import load_property_set
from ..models.sysprop import Property, PropertySet, PropType, Scope
from .common import GENERATED_FILE_BANNER, common_property_data

logger = logging.getLogger(__name__)

# Unsigned values are carried in the signed Java type of the same width.
_JAVA_SCALAR_TYPES = {
    PropType.Boolean: "Boolean",
    PropType.Integer: "Integer",
    PropType.UInt: "Integer",
    PropType.Long: "Long",
    PropType.ULong: "Long",
    PropType.Double: "Double",
    PropType.String: "String",
}

_JAVA_PARSERS = {
    PropType.Boolean: "tryParseBoolean",
    PropType.Integer: "tryParseInteger",
    PropType.UInt: "tryParseUInt",
    PropType.Long: "tryParseLong",
    PropType.ULong: "tryParseULong",
    PropType.Double: "tryParseDouble",
    PropType.String: "tryParseString",
}

_JAVA_ANNOTATIONS = {
    Scope.System: "@SystemApi",
    Scope.Internal: "/** @hide */",
}


def get_java_enum_type_name(prop: Property) -> str:
    return prop.identifier + "_values"


def get_java_type_name(prop: Property) -> str:
    element = prop.type.element_type
    element_name = get_java_enum_type_name(prop) if element == PropType.Enum else _JAVA_SCALAR_TYPES[element]
    if prop.is_list:
        return f"List<{element_name}>"
    return element_name


def get_parsing_expression(prop: Property, native_method: Optional[str] = None) -> str:
    if native_method is None:
        native_method = f"native_{prop.identifier}_get"
    native_call = f"{native_method}()"

    if prop.type == PropType.Enum:
        return f"tryParseEnum({get_java_enum_type_name(prop)}.class, {native_call})"
    if prop.type == PropType.EnumList:
        return f"tryParseEnumList({get_java_enum_type_name(prop)}.class, {native_call})"
    if prop.is_list:
        element_parser = _JAVA_PARSERS[prop.type.element_type]
        return f"tryParseList(v -> {element_parser}(v), {native_call})"
    return f"{_JAVA_PARSERS[prop.type]}({native_call})"


def get_formatting_expression(prop: Property) -> str:
    if prop.integer_as_bool and prop.type == PropType.Boolean:
        return "(value ? \"1\" : \"0\")"
    if prop.integer_as_bool and prop.type == PropType.BooleanList:
        return "formatBoolListAsInt(value)"
    if prop.type in (PropType.UInt, PropType.ULong):
        return f"{_JAVA_SCALAR_TYPES[prop.type]}.toUnsignedString(value)"
    if prop.type in (PropType.UIntList, PropType.ULongList):
        return f"formatUnsignedList(value, {_JAVA_SCALAR_TYPES[prop.type.element_type]}::toUnsignedString)"
    if prop.is_list:
        return "formatList(value)"
    return "value.toString()"


def get_java_package_name(props: PropertySet) -> str:
    return props.package_name


def get_java_class_name(props: PropertySet) -> str:
    return props.class_name


def _property_data(props: PropertySet, prop: Property) -> Dict[str, Any]:
    data = common_property_data(props, prop)
    data["java_type"] = get_java_type_name(prop)
    data["enum_name"] = get_java_enum_type_name(prop)
    data["parsing_expression"] = get_parsing_expression(prop)
    data["legacy_parsing_expression"] = get_parsing_expression(prop, f"native_{prop.identifier}_legacy_get")
    data["formatting_expression"] = get_formatting_expression(prop)
    data["annotation"] = _JAVA_ANNOTATIONS.get(prop.scope)
    return data


def _template_data(props: PropertySet, scope: Scope) -> Dict[str, Any]:
    return {
        "banner": GENERATED_FILE_BANNER,
        "module": props.module,
        "package_name": get_java_package_name(props),
        "class_name": get_java_class_name(props),
        "jni_class_name": props.module.replace(".", "/"),
        "properties": [_property_data(props, prop) for prop in props.visible_properties(scope)],
    }


def generate_java_class(props: PropertySet, scope: Scope = Scope.Internal) -> str:
    """Render the Java class exposing typed accessors for ``props``."""
    renderer = TemplateRenderer()
    return renderer.render_template("java/class.java.jinja2", **_template_data(props, scope))


def generate_jni_library(props: PropertySet, scope: Scope = Scope.Internal) -> str:
    """Render the JNI C++ source backing the native methods of the Java class."""
    renderer = TemplateRenderer()
    return renderer.render_template("java/jni.cpp.jinja2", **_template_data(props, scope))


def generate_java_library(
    input_file_path: str,
    java_output_dir: str,
    jni_output_dir: str,
    scope: Scope = Scope.Internal,
) -> Tuple[str, str]:
    """Generate ``<Class>.java`` under its package directory and ``<Class>_jni.cpp``.

    Nothing is written unless the file parses and validates.

    Returns:
        (java path, jni path)
    """
    props = load_property_set(input_file_path)

    logger.info(f"Generating Java sysprop library for module: {props.module}")
    java_result = generate_java_class(props, scope)
    jni_result = generate_jni_library(props, scope)

    java_package_dir = os.path.join(java_output_dir, *get_java_package_name(props).split("."))
    ensure_directory(java_package_dir)
    ensure_directory(jni_output_dir)

    class_name = get_java_class_name(props)
    java_output_file = os.path.join(java_package_dir, class_name + ".java")
    jni_output_file = os.path.join(jni_output_dir, class_name + "_jni.cpp")

    write_generated_file(java_result, java_output_file, "generated java class")
    write_generated_file(jni_result, jni_output_file, "generated jni library")

    return java_output_file, jni_output_file
