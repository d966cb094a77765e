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

"""Protobuf text-format parser for ``.sysprop`` files.

The message types are described in code and registered in a private
descriptor pool, so no ``protoc`` step is needed::

    owner: Vendor
    module: "vendor.example.ExampleProperties"
    prefix: "vendor.example"
    prop {
        name: "timeout_ms"
        type: Integer
        scope: Public
        access: ReadWrite
    }
"""

import logging
from typing import Any

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory, text_format

from ...exceptions import ParseError
from ..sysprop import Access, Owner, PropType, Property, PropertySet, Scope

logger = logging.getLogger(__name__)

_PACKAGE = "sysprop"
_FieldProto = descriptor_pb2.FieldDescriptorProto

# (field name, number, type, enum/message type name, label)
_PROPERTY_FIELDS = (
    ("name", 1, _FieldProto.TYPE_STRING, None, _FieldProto.LABEL_OPTIONAL),
    ("type", 2, _FieldProto.TYPE_ENUM, "Type", _FieldProto.LABEL_OPTIONAL),
    ("scope", 3, _FieldProto.TYPE_ENUM, "Scope", _FieldProto.LABEL_OPTIONAL),
    ("enum_values", 4, _FieldProto.TYPE_STRING, None, _FieldProto.LABEL_OPTIONAL),
    ("readonly", 5, _FieldProto.TYPE_BOOL, None, _FieldProto.LABEL_OPTIONAL),
    ("access", 6, _FieldProto.TYPE_ENUM, "Access", _FieldProto.LABEL_OPTIONAL),
    ("legacy_prop_name", 7, _FieldProto.TYPE_STRING, None, _FieldProto.LABEL_OPTIONAL),
    ("deprecated", 8, _FieldProto.TYPE_BOOL, None, _FieldProto.LABEL_OPTIONAL),
    ("integer_as_bool", 9, _FieldProto.TYPE_BOOL, None, _FieldProto.LABEL_OPTIONAL),
)

_PROPERTIES_FIELDS = (
    ("owner", 1, _FieldProto.TYPE_ENUM, "Owner", _FieldProto.LABEL_OPTIONAL),
    ("module", 2, _FieldProto.TYPE_STRING, None, _FieldProto.LABEL_OPTIONAL),
    ("prefix", 3, _FieldProto.TYPE_STRING, None, _FieldProto.LABEL_OPTIONAL),
    ("prop", 4, _FieldProto.TYPE_MESSAGE, "Property", _FieldProto.LABEL_REPEATED),
)

_ENUMS = (
    ("Owner", Owner),
    ("Scope", Scope),
    ("Access", Access),
    ("Type", PropType),
)


def _add_message(file_proto: descriptor_pb2.FileDescriptorProto, name: str, fields) -> None:
    message_proto = file_proto.message_type.add(name=name)
    for field_name, number, field_type, type_name, label in fields:
        field_proto = message_proto.field.add(name=field_name, number=number, type=field_type, label=label)
        if type_name is not None:
            field_proto.type_name = f".{_PACKAGE}.{type_name}"
        if field_name == "scope":
            # An omitted scope must never widen the generated API.
            field_proto.default_value = Scope.Internal.name


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="sysprop_generator/sysprop.proto",
        package=_PACKAGE,
        syntax="proto2",
    )
    for enum_name, enum_cls in _ENUMS:
        enum_proto = file_proto.enum_type.add(name=enum_name)
        for member in enum_cls:
            enum_proto.value.add(name=member.name, number=int(member))

    _add_message(file_proto, "Property", _PROPERTY_FIELDS)
    _add_message(file_proto, "Properties", _PROPERTIES_FIELDS)
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())

PropertiesMessage = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{_PACKAGE}.Properties"))


def _to_property(message: Any) -> Property:
    return Property(
        name=message.name,
        type=PropType(message.type),
        scope=Scope(message.scope),
        enum_values=message.enum_values,
        access=Access(message.access) if message.HasField("access") else None,
        readonly=message.readonly if message.HasField("readonly") else None,
        legacy_prop_name=message.legacy_prop_name,
        deprecated=message.deprecated,
        integer_as_bool=message.integer_as_bool,
    )


def parse_properties_message(content: str) -> Any:
    """Decode text-format content into a raw ``sysprop.Properties`` message.

    Raises:
        google.protobuf.text_format.ParseError: If content is not well-formed
    """
    message = PropertiesMessage()
    text_format.Parse(content, message)
    return message


def parse_properties(content: str, file_path: str = "<string>") -> PropertySet:
    """Parse text-format sysprop content into a PropertySet.

    No semantic checks are done here; see ``validation.property_validator``.

    Args:
        content: Text-format sysprop content
        file_path: Path used in the error message

    Returns:
        Decoded PropertySet

    Raises:
        ParseError: If content does not follow the sysprop grammar
    """
    try:
        message = parse_properties_message(content)
    except text_format.ParseError as exc:
        logger.debug(f"Text format error in {file_path}: {exc}")
        raise ParseError(f"Error parsing file {file_path}") from exc

    return PropertySet(
        owner=Owner(message.owner),
        module=message.module,
        prefix=message.prefix,
        properties=[_to_property(prop) for prop in message.prop],
    )
