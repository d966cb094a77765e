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

"""Naming, uniqueness and ownership rules for parsed sysprop files.

Checks run in a fixed order and stop at the first violation. Only that one
message is ever reported, so both the order and the wording are part of the
contract with callers.
"""

import logging
from typing import Optional, Set

from ..exceptions import ValidationError
from ..models.sysprop import PLATFORM_MODULE_NAME, Access, Owner, Property, PropertySet
from ..utils.naming import is_correct_identifier, is_correct_property_name, prop_name_to_identifier

logger = logging.getLogger(__name__)

_RESERVED_PLATFORM_NAMESPACES = ("vendor.", "odm.")


def validate_property(props: PropertySet, prop: Property) -> None:
    """Validate a single property declaration of ``props``.

    Raises:
        ValidationError: On the first rule the property breaks
    """
    if not is_correct_property_name(prop.name):
        raise ValidationError(f'Invalid prop name "{prop.name}"')

    if prop.is_enum:
        names = prop.enum_value_list
        if not names:
            raise ValidationError(f'Enum values are empty for prop "{prop.name}"')

        for name in names:
            if not is_correct_identifier(name):
                raise ValidationError(f'Invalid enum value "{name}" for prop "{prop.name}"')

        seen: Set[str] = set()
        for name in names:
            if name in seen:
                raise ValidationError(f'Duplicated enum value "{name}" for prop "{prop.name}"')
            seen.add(name)

    if props.owner == Owner.Platform:
        full_name = props.prefix + prop.name
        if full_name.startswith(_RESERVED_PLATFORM_NAMESPACES):
            raise ValidationError(
                f'Prop "{prop.name}" owned by platform cannot have vendor. or odm. namespace'
            )


def validate_properties(props: PropertySet) -> None:
    """Validate a parsed property set.

    Raises:
        ValidationError: With the message of the first violated rule
    """
    names = props.module.split('.')
    if len(names) <= 1:
        raise ValidationError(f'Invalid module name "{props.module}"')

    for name in names:
        if not is_correct_identifier(name):
            raise ValidationError(f'Invalid name "{name}" in module')

    if props.prefix and not is_correct_property_name(props.prefix):
        raise ValidationError(f'Invalid prefix "{props.prefix}"')

    if not props.properties:
        raise ValidationError("There is no defined property")

    for prop in props.properties:
        validate_property(props, prop)

    identifiers: Set[str] = set()
    for prop in props.properties:
        identifier = prop_name_to_identifier(prop.name)
        if identifier in identifiers:
            raise ValidationError(f'Duplicated prop name "{prop.name}"')
        identifiers.add(identifier)

    if props.owner == Owner.Platform:
        if props.module != PLATFORM_MODULE_NAME:
            raise ValidationError(
                f'Platform-defined properties should have "{PLATFORM_MODULE_NAME}" as module name'
            )
    elif props.module == PLATFORM_MODULE_NAME:
        raise ValidationError(f'Vendor or Odm cannot use "{PLATFORM_MODULE_NAME}" as module name')

    logger.debug(f"Validated {len(props.properties)} properties of module {props.module}")


def check_properties(props: PropertySet) -> Optional[str]:
    """Return the validation failure message for ``props``, or None if it is valid."""
    try:
        validate_properties(props)
    except ValidationError as exc:
        return str(exc)
    return None


def normalize_properties(props: PropertySet) -> PropertySet:
    """Fill in the access mode of properties that did not declare one.

    An explicit ``access`` wins; otherwise ``readonly`` picks between
    ``Readonly`` and ``ReadWrite``; with neither, the property is read-only.
    Must run after validation. Returns ``props`` for chaining.
    """
    for prop in props.properties:
        if prop.access is None:
            if prop.readonly is None:
                prop.readonly = True
            prop.access = Access.Readonly if prop.readonly else Access.ReadWrite
        else:
            prop.readonly = prop.access == Access.Readonly
    return props
