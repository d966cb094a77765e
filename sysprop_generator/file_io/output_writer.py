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

"""Writing generated sources to disk."""

import logging
import os

from ..exceptions import GenerationError

logger = logging.getLogger(__name__)


def ensure_directory(directory: str) -> None:
    """Create ``directory`` and its parents if needed.

    Raises:
        GenerationError: If the directory cannot be created
    """
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as exc:
        raise GenerationError(f"Creating directory to {directory} failed: {exc.strerror or exc}") from exc


def write_generated_file(content: str, output_path: str, description: str) -> str:
    """Write one generated file, replacing any previous version.

    Args:
        content: Generated text
        output_path: Destination path; its directory must already exist
        description: What is written, used in the error message (e.g. "generated header")

    Returns:
        The written path

    Raises:
        GenerationError: If the file cannot be written
    """
    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as exc:
        raise GenerationError(f"Writing {description} to {output_path} failed: {exc.strerror or exc}") from exc

    logger.info(f"Generated: {output_path}")
    return output_path
