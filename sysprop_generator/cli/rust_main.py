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


"""Command line for the Rust accessor module."""

import argparse
from typing import List, Optional

from ..config import generator_config
from ..exceptions import SyspropGeneratorError
from ..generators.rust_generator import generate_rust_library
from .common import add_input_argument, add_scope_argument, parse_scope, single_input_file


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sysprop-rust",
        description="Generate a Rust module with typed accessors for a sysprop file",
    )
    parser.add_argument("--rust-output-dir", default=".", help="Directory for the generated mod.rs")
    add_scope_argument(parser)
    add_input_argument(parser)

    args = parser.parse_args(argv)
    input_file = single_input_file(parser, args.input_files)

    logger = generator_config.set_logging()
    try:
        generate_rust_library(input_file, args.rust_output_dir, scope=parse_scope(args.scope))
    except SyspropGeneratorError as exc:
        logger.critical(f"Error during generating rust sysprop from {input_file}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
