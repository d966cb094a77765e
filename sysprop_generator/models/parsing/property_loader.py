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

"""Single entry point from a sysprop file on disk to the validated IR."""

import logging
from pathlib import Path
from typing import Union

from ...exceptions import ParseError
from ...validation.property_validator import normalize_properties, validate_properties
from ..sysprop import PropertySet
from .textproto_parser import parse_properties
from .yaml_parser import YAML_SUFFIXES, parse_properties_yaml

logger = logging.getLogger(__name__)


def parse_property_file(file_path: Union[str, Path]) -> PropertySet:
    """Read and decode a sysprop file without semantic checks.

    ``.yaml``/``.yml`` files use the YAML form, everything else the text format.

    Raises:
        ParseError: If the file cannot be read or decoded
    """
    path = Path(file_path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ParseError(f"Error reading file {file_path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Error reading file {file_path}: {exc}") from exc

    logger.debug(f"Parsing sysprop file: {path}")
    if path.suffix.lower() in YAML_SUFFIXES:
        return parse_properties_yaml(content, str(file_path))
    return parse_properties(content, str(file_path))


def load_property_set(file_path: Union[str, Path]) -> PropertySet:
    """Parse, validate and normalize a sysprop file.

    Returns:
        The IR ready for code generation

    Raises:
        ParseError: If the file cannot be read or decoded
        ValidationError: If the file breaks a naming or ownership rule
    """
    props = parse_property_file(file_path)
    validate_properties(props)
    return normalize_properties(props)
