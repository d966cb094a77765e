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


"""Argument handling shared by the generator command lines."""

import argparse
from typing import List

from ..models.sysprop import Scope


def add_scope_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--scope",
        choices=[scope.name for scope in Scope],
        default=Scope.Internal.name,
        help="Widest property scope to expose (default: Internal)",
    )


def add_input_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input_files", nargs="*", metavar="FILE", help="Sysprop file to generate from")


def single_input_file(parser: argparse.ArgumentParser, input_files: List[str]) -> str:
    """Return the only positional input, reporting a usage error otherwise."""
    if not input_files:
        parser.error("No input file specified")
    if len(input_files) > 1:
        parser.error("More than one input file")
    return input_files[0]


def parse_scope(name: str) -> Scope:
    return Scope[name]
