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

"""YAML form of sysprop files.

Carries the same fields as the text format, with ``props`` as a list::

    owner: Vendor
    module: vendor.example.ExampleProperties
    prefix: vendor.example
    props:
      - name: timeout_ms
        type: Integer
        scope: Public
        access: ReadWrite
"""

import logging
from typing import Any, Dict, Tuple

import yaml

from ...exceptions import ParseError
from ...file_io.source_location import format_source, lookup_source
from ..json_schema_loader import validate_against_schema
from ..sysprop import Access, Owner, PropType, Property, PropertySet, Scope

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class YamlParser:
    """YAML loader that also records where each node came from."""

    @staticmethod
    def _json_pointer_escape(token: str) -> str:
        # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
        return token.replace("~", "~0").replace("/", "~1")

    @classmethod
    def _build_source_map_from_yaml(cls, content: str) -> Dict[str, Dict[str, int]]:
        """Build a mapping from YAML JSON-pointer-like paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes returned by safe_load.
        """
        source_map: Dict[str, Dict[str, int]] = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by safe_load.
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{cls._json_pointer_escape(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    def load_from_string_with_source(self, content: str) -> Tuple[Any, Dict[str, Dict[str, int]]]:
        """Load YAML content and return (data, source_map).

        source_map keys are JSON-pointer-like YAML paths (e.g. "/props/0/name").

        Raises:
            yaml.YAMLError: If content is not well-formed YAML
        """
        data = yaml.safe_load(content)
        if data is None:
            data = {}
        return data, self._build_source_map_from_yaml(content)


# Global parser instance
yaml_parser = YamlParser()


def _to_property(entry: Dict[str, Any]) -> Property:
    access = entry.get("access")
    return Property(
        name=entry.get("name", ""),
        type=PropType[entry.get("type", PropType.Boolean.name)],
        scope=Scope[entry.get("scope", Scope.Internal.name)],
        enum_values=entry.get("enum_values", ""),
        access=Access[access] if access is not None else None,
        readonly=entry.get("readonly"),
        legacy_prop_name=entry.get("legacy_prop_name", ""),
        deprecated=entry.get("deprecated", False),
        integer_as_bool=entry.get("integer_as_bool", False),
    )


def parse_properties_yaml(content: str, file_path: str = "<string>") -> PropertySet:
    """Parse the YAML form of a sysprop file into a PropertySet.

    Raises:
        ParseError: If content is not YAML or does not match the sysprop schema
    """
    try:
        data, source_map = yaml_parser.load_from_string_with_source(content)
    except yaml.YAMLError as exc:
        logger.debug(f"YAML error in {file_path}: {exc}")
        raise ParseError(f"Error parsing file {file_path}") from exc

    issues = validate_against_schema(data)
    if issues:
        for issue in issues:
            loc = lookup_source(source_map, issue.yaml_path, file_path)
            logger.debug(f"Schema issue: {issue.message}{format_source(loc)}")
        raise ParseError(f"Error parsing file {file_path}")

    return PropertySet(
        owner=Owner[data.get("owner", Owner.Platform.name)],
        module=data.get("module", ""),
        prefix=data.get("prefix", ""),
        properties=[_to_property(entry) for entry in data.get("props", [])],
    )
