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

"""Configuration management for the format validator."""

import os
import logging
from dataclasses import dataclass

from .report.log_level import LogLevel
from .report.processing_report import ListProcessingReport
from .utils.logging_utils import PACKAGE_LOGGER_NAME, configure_split_stream_logging, level_from_name

ENV_PREFIX = "JSON_FORMAT_VALIDATOR_"


@dataclass
class ValidatorConfig:
    """Configuration class for format validation runs."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    report_level: str = "INFO"
    exception_level: str = "NONE"
    draft: str = "draftv4"
    cache_enabled: bool = True
    max_cache_size: int = 128

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv(f'{ENV_PREFIX}LOG_LEVEL', 'WARNING'),
            print_level=os.getenv(f'{ENV_PREFIX}PRINT_LEVEL', 'WARNING'),
            report_level=os.getenv(f'{ENV_PREFIX}REPORT_LEVEL', 'INFO'),
            exception_level=os.getenv(f'{ENV_PREFIX}EXCEPTION_LEVEL', 'NONE'),
            draft=os.getenv(f'{ENV_PREFIX}DRAFT', 'draftv4'),
            cache_enabled=os.getenv(f'{ENV_PREFIX}CACHE_ENABLED', 'true').lower() == 'true',
            max_cache_size=int(os.getenv(f'{ENV_PREFIX}MAX_CACHE_SIZE', '128'))
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = level_from_name(self.log_level, logging.WARNING)
        stderr_level = level_from_name(self.print_level, logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name=PACKAGE_LOGGER_NAME,
        )

    def new_report(self) -> ListProcessingReport:
        """Create an empty report with the configured thresholds."""
        return ListProcessingReport(
            log_level=LogLevel.from_name(self.report_level),
            exception_threshold=LogLevel.from_name(self.exception_level),
        )


# Global configuration instance
validator_config = ValidatorConfig.from_env()
