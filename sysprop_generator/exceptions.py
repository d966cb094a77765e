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

"""Custom exceptions for the sysprop generator."""


class SyspropGeneratorError(Exception):
    """Base exception for sysprop generator related errors."""
    pass


class ParseError(SyspropGeneratorError):
    """Exception raised when a sysprop file cannot be read or decoded."""
    pass


class ValidationError(SyspropGeneratorError):
    """Exception raised when a decoded sysprop file breaks a naming or ownership rule."""
    pass


class GenerationError(SyspropGeneratorError):
    """Exception raised when generated sources cannot be written."""
    pass
