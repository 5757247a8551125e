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

"""A single diagnostic produced while processing a schema or instance."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from ..exceptions import ProcessingError
from .log_level import LogLevel


class ProcessingMessage:
    """Diagnostic with a message, a log level and structured fields.

    Fields are kept in insertion order so that rendered reports are stable.
    """

    def __init__(self, message: Any = None, log_level: LogLevel = LogLevel.INFO):
        self.message = message
        self.log_level = log_level
        self.fields: Dict[str, Any] = {}

    def set_message(self, message: Any) -> "ProcessingMessage":
        self.message = message
        return self

    def set_log_level(self, log_level: LogLevel) -> "ProcessingMessage":
        self.log_level = log_level
        return self

    def put(self, key: str, value: Any) -> "ProcessingMessage":
        """Set a structured field and return the message."""
        if key in ("message", "level"):
            raise ValueError(f"Field name '{key}' is reserved")
        self.fields[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.fields

    @property
    def text(self) -> str:
        if isinstance(self.message, Enum):
            return str(self.message.value)
        return "" if self.message is None else str(self.message)

    def as_dict(self) -> Dict[str, Any]:
        """JSON-compatible view: level, message, then fields."""
        result: Dict[str, Any] = {"level": str(self.log_level), "message": self.text}
        result.update(self.fields)
        return result

    def as_exception(self) -> ProcessingError:
        return ProcessingError(str(self), processing_message=self)

    def __str__(self) -> str:
        details = ", ".join(f"{k}={v!r}" for k, v in self.fields.items())
        return f"{str(self.log_level)}: {self.text}" + (f" ({details})" if details else "")

    def __repr__(self) -> str:
        return f"ProcessingMessage({self.as_dict()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessingMessage):
            return NotImplemented
        return (
            self.message == other.message
            and self.log_level == other.log_level
            and self.fields == other.fields
        )

    __hash__ = None  # mutable


def new_message(message: Optional[Any] = None, **fields: Any) -> ProcessingMessage:
    """Shortcut to build a message with fields in one call."""
    msg = ProcessingMessage(message)
    for key, value in fields.items():
        msg.put(key, value)
    return msg
