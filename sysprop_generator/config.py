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

"""Configuration management for the sysprop generator."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class GeneratorConfig:
    """Configuration class for a generator run."""
    log_level: str = "INFO"
    print_level: str = "ERROR"

    # paths
    template_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'GeneratorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SYSPROP_GENERATOR_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SYSPROP_GENERATOR_PRINT_LEVEL', 'ERROR'),
            template_dir=os.getenv('SYSPROP_GENERATOR_TEMPLATE_DIR') or None,
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('sysprop_generator')


# Global configuration instance
generator_config = GeneratorConfig.from_env()
