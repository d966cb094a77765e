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

"""Helpers shared by the language generators."""

from __future__ import annotations

import os
from typing import Any, Dict

from ..models.sysprop import Access, Property, PropertySet, property_key

GENERATED_FILE_BANNER = "// Generated by the sysprop generator. DO NOT EDIT!"


def common_property_data(props: PropertySet, prop: Property) -> Dict[str, Any]:
    """Template fields every generator needs for one property."""
    return {
        "name": prop.name,
        "id": prop.identifier,
        "key": property_key(props, prop),
        "legacy_key": prop.legacy_prop_name,
        "is_enum": prop.is_enum,
        "is_list": prop.is_list,
        "enum_values": prop.enum_value_list if prop.is_enum else [],
        "readonly": prop.access == Access.Readonly,
        "deprecated": prop.deprecated,
        "scope": prop.scope.name,
    }


def output_basename(input_file_path: str) -> str:
    return os.path.basename(input_file_path)
