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

"""JSON Schema loader for the YAML form of sysprop files."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema


# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[str] = None


def get_schema_path(schema_name: str) -> Path:
    """Get the path to a bundled JSON Schema file.

    Args:
        schema_name: Schema name without extension (e.g., "sysprop")

    Returns:
        Path to the schema file
    """
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / f"{schema_name}.schema.json"


def load_schema(schema_name: str) -> dict:
    """Load a bundled JSON Schema file.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if schema_name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[schema_name]

    schema_path = get_schema_path(schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found for {schema_name}: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    _SCHEMA_CACHE[schema_name] = schema
    return schema


def validate_against_schema(data: Any, schema_name: str = "sysprop") -> List[SchemaIssue]:
    """Validate decoded YAML data against a bundled JSON Schema.

    Every violation is reported, ordered by its location in the document.

    Returns:
        List of SchemaIssue objects (empty when the data conforms)
    """
    if not isinstance(data, dict):
        return [SchemaIssue(message="Root must be a mapping/object", yaml_path="")]

    schema = load_schema(schema_name)
    validator = jsonschema.Draft7Validator(schema)

    issues: List[SchemaIssue] = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]):
        path = "/" + "/".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
        issues.append(SchemaIssue(message=error.message, yaml_path=path))
    return issues

