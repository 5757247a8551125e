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

"""Reports collecting processing messages."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional

from .log_level import LogLevel
from .message import ProcessingMessage


class ProcessingReport(ABC):
    """Sink for processing messages.

    Two thresholds apply to every logged message:

    - ``log_level``: messages below it are not retained
    - ``exception_threshold``: messages at or above it raise
      :class:`~json_format_validator.exceptions.ProcessingError`

    A report is not thread-safe; use one report per validation run.
    """

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        exception_threshold: LogLevel = LogLevel.FATAL,
    ):
        """Initialize the report.

        Args:
            log_level: Minimum level a message needs to be retained
            exception_threshold: Level from which logging a message raises
        """
        self.log_level = log_level
        self.exception_threshold = exception_threshold
        self._success = True

    def debug(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.ERROR, message)

    def fatal(self, message: ProcessingMessage) -> None:
        self.log(LogLevel.FATAL, message)

    def log(self, level: LogLevel, message: ProcessingMessage) -> None:
        """Log *message* at *level*.

        Raises:
            ProcessingError: If *level* reaches the exception threshold.
        """
        message.set_log_level(level)
        if level >= LogLevel.ERROR:
            self._success = False
        if level >= self.exception_threshold:
            raise message.as_exception()
        if level < self.log_level:
            return
        self._do_log(message)

    def is_success(self) -> bool:
        """False once an error or fatal message was logged, even if not retained."""
        return self._success

    @abstractmethod
    def _do_log(self, message: ProcessingMessage) -> None:
        """Retain a message that passed the thresholds."""
        pass


class ListProcessingReport(ProcessingReport):
    """Report keeping retained messages in a list, in logging order."""

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        exception_threshold: LogLevel = LogLevel.FATAL,
    ):
        super().__init__(log_level, exception_threshold)
        self._messages: List[ProcessingMessage] = []

    def _do_log(self, message: ProcessingMessage) -> None:
        self._messages.append(message)

    @property
    def messages(self) -> List[ProcessingMessage]:
        return list(self._messages)

    @property
    def errors(self) -> List[ProcessingMessage]:
        return [m for m in self._messages if m.log_level >= LogLevel.ERROR]

    @property
    def warnings(self) -> List[ProcessingMessage]:
        return [m for m in self._messages if m.log_level == LogLevel.WARNING]

    def merge(self, other: "ListProcessingReport") -> None:
        """Append the messages of *other*, keeping this report's thresholds."""
        for message in other.messages:
            self.log(message.log_level, message)
        if not other.is_success():
            self._success = False

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success": self.is_success(),
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "messages": [m.as_dict() for m in self._messages],
        }

    def __iter__(self) -> Iterator[ProcessingMessage]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)


class LoggingProcessingReport(ProcessingReport):
    """Report forwarding retained messages to a standard ``logging`` logger."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        log_level: LogLevel = LogLevel.INFO,
        exception_threshold: LogLevel = LogLevel.FATAL,
    ):
        super().__init__(log_level, exception_threshold)
        self.logger = logger or logging.getLogger(__name__)

    def _do_log(self, message: ProcessingMessage) -> None:
        self.logger.log(message.log_level.to_logging(), "%s", message)
