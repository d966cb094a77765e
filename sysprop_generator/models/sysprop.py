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

"""In-memory description of a sysprop file.

The same classes serve as the parser output and, once validated and
normalized, as the IR handed to the code generators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from ..utils.naming import prop_name_to_identifier

PLATFORM_MODULE_NAME = "android.os.PlatformProperties"


class Owner(IntEnum):
    """Build partition that defines a property set."""
    Platform = 0
    Vendor = 1
    Odm = 2


class Scope(IntEnum):
    """Visibility tier of a property.

    Values grow with visibility of the generated API surface: a generator run
    for a scope includes every property whose scope is less than or equal to
    it, so ``Internal`` sees everything and ``Public`` only public properties.
    """
    Public = 0
    System = 1
    Internal = 2


class Access(IntEnum):
    Readonly = 0
    Writeonce = 1
    ReadWrite = 2


class PropType(IntEnum):
    """Property value type. List variants start at 20."""
    Boolean = 0
    Integer = 1
    Long = 2
    Double = 3
    String = 4
    Enum = 5
    UInt = 6
    ULong = 7

    BooleanList = 20
    IntegerList = 21
    LongList = 22
    DoubleList = 23
    StringList = 24
    EnumList = 25
    UIntList = 26
    ULongList = 27

    @property
    def is_list(self) -> bool:
        return self >= PropType.BooleanList

    @property
    def is_enum(self) -> bool:
        return self in (PropType.Enum, PropType.EnumList)

    @property
    def element_type(self) -> "PropType":
        """Scalar type of list elements; scalars return themselves."""
        if self.is_list:
            return PropType(self - PropType.BooleanList)
        return self


@dataclass
class Property:
    """A single property declaration."""
    name: str
    type: PropType = PropType.Boolean
    scope: Scope = Scope.Internal
    enum_values: str = ""
    access: Optional[Access] = None     # None = not declared in the file
    readonly: Optional[bool] = None     # legacy spelling of access
    legacy_prop_name: str = ""
    deprecated: bool = False
    integer_as_bool: bool = False

    @property
    def identifier(self) -> str:
        return prop_name_to_identifier(self.name)

    @property
    def is_enum(self) -> bool:
        return self.type.is_enum

    @property
    def is_list(self) -> bool:
        return self.type.is_list

    @property
    def enum_value_list(self) -> List[str]:
        return self.enum_values.split('|')

    @property
    def is_readonly(self) -> bool:
        return self.access == Access.Readonly or (self.access is None and self.readonly is not False)


@dataclass
class PropertySet:
    """A parsed sysprop file."""
    owner: Owner = Owner.Platform
    module: str = ""
    prefix: str = ""
    properties: List[Property] = field(default_factory=list)

    @property
    def class_name(self) -> str:
        return self.module[self.module.rfind('.') + 1:]

    @property
    def package_name(self) -> str:
        return self.module[:self.module.rfind('.')]

    def visible_properties(self, scope: Scope) -> List[Property]:
        return [prop for prop in self.properties if prop.scope <= scope]


def property_key(props: PropertySet, prop: Property) -> str:
    """Runtime key of a property: optional ``ro.``, the set prefix, then the name."""
    prefix = ("ro." if prop.access != Access.ReadWrite else "") + props.prefix
    if prefix and not prefix.endswith('.'):
        prefix += '.'
    return prefix + prop.name
