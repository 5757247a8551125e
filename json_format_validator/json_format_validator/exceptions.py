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

"""Custom exceptions for the JSON format validator."""


class FormatValidatorError(Exception):
    """Base exception for format-validator related errors."""
    pass


class SchemaStructureError(FormatValidatorError):
    """Exception raised when a schema node is structurally invalid."""
    pass


class DuplicateKeyError(FormatValidatorError):
    """Exception raised when a dictionary key is registered twice."""
    pass


class FrozenDictionaryError(FormatValidatorError):
    """Exception raised when a frozen dictionary builder is mutated."""
    pass


class DocumentLoadError(FormatValidatorError):
    """Exception raised when a schema or instance document cannot be loaded."""
    pass


class ProcessingError(FormatValidatorError):
    """Exception raised when a report message reaches the exception threshold.

    The offending :class:`ProcessingMessage` is kept in ``processing_message``.
    """

    def __init__(self, message, processing_message=None):
        super().__init__(message)
        self.processing_message = processing_message
