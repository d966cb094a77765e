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


"""Command line for the C++ accessor library."""

import argparse
from typing import List, Optional

from ..config import generator_config
from ..exceptions import SyspropGeneratorError
from ..generators.cpp_generator import generate_cpp_files
from .common import add_input_argument, add_scope_argument, parse_scope, single_input_file


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sysprop-cpp",
        description="Generate a C++ header and source with typed accessors for a sysprop file",
    )
    parser.add_argument("--header-output-dir", default=".", help="Directory for the generated header")
    parser.add_argument("--source-output-dir", default=".", help="Directory for the generated source")
    parser.add_argument(
        "--include-name",
        default=None,
        help="Header name used in the #include of the source (default: '<basename>.h')",
    )
    add_scope_argument(parser)
    add_input_argument(parser)

    args = parser.parse_args(argv)
    input_file = single_input_file(parser, args.input_files)

    logger = generator_config.set_logging()
    try:
        generate_cpp_files(
            input_file,
            args.header_output_dir,
            args.source_output_dir,
            include_name=args.include_name,
            scope=parse_scope(args.scope),
        )
    except SyspropGeneratorError as exc:
        logger.critical(f"Error during generating cpp sysprop from {input_file}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
