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

"""Identifier and property-name helpers shared by the validator and the generators."""

import re

_IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def is_correct_identifier(name: str) -> bool:
    """Check if a string is a C-style identifier.

    Identifier: Starts with an ASCII letter or underscore, followed by ASCII
    letters, digits or underscores.
    Examples: status, _hidden, value2

    Args:
        name: String to check

    Returns:
        True if string is a valid identifier
    """
    if not name:
        return False
    return _IDENTIFIER_PATTERN.fullmatch(name) is not None


def is_correct_property_name(name: str) -> bool:
    """Check if a string is a dotted property name.

    Every dot-separated segment must be an identifier, so empty segments
    (leading, trailing or doubled dots) are rejected.
    Examples: persist.sys.locale, audio_hal, ro.boot.serialno

    Args:
        name: String to check

    Returns:
        True if string is a valid property name
    """
    if not name:
        return False
    return all(is_correct_identifier(token) for token in name.split('.'))


def prop_name_to_identifier(name: str) -> str:
    """Map a dotted property name to the identifier used in generated code."""
    return name.replace('.', '_')


def snake_to_camel(name: str) -> str:
    """Convert snake_case to CamelCase, keeping the case of non-leading letters.

    Examples: test_enum -> TestEnum, a -> A, D -> D
    """
    return ''.join(part[:1].upper() + part[1:] for part in name.split('_'))


def camel_to_snake(name: str) -> str:
    """Convert CamelCase (or mixed case) to snake_case.

    An underscore is inserted before an uppercase letter that follows a
    lowercase letter or digit, or that ends a run of capitals and is followed
    by a lowercase letter.
    Examples: testBoolean -> test_boolean, test_BOOLeaN -> test_boo_lea_n
    """
    chars = []
    for idx, ch in enumerate(name):
        if ch.isupper() and idx > 0:
            prev = name[idx - 1]
            nxt = name[idx + 1] if idx + 1 < len(name) else ''
            if prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower()):
                chars.append('_')
        chars.append(ch.lower())
    return ''.join(chars)
