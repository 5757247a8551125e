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

"""Command line checking of instance files against a schema's formats."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..api import build_validation_processor
from ..config import ValidatorConfig, validator_config
from ..exceptions import DocumentLoadError, FormatValidatorError, ProcessingError
from ..file_io.document_loader import DocumentLoader
from ..processing.validation_data import ValidationData
from ..report.message import ProcessingMessage
from ..report.processing_report import ListProcessingReport
from ..tree.json_tree import JsonTree, SchemaTree

__all__ = ['check_files', 'CheckResult']

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Report for a single instance file."""
    file: Path
    report: ListProcessingReport

    def as_dict(self) -> Dict[str, Any]:
        result = {'file': str(self.file)}
        result.update(self.report.as_dict())
        return result


def _failure(report: ListProcessingReport, domain: str, error: Exception) -> ListProcessingReport:
    report.error(ProcessingMessage(str(error)).put('domain', domain))
    return report


def check_files(
    schema_path: Path,
    instance_paths: List[Path],
    config: Optional[ValidatorConfig] = None,
    loader: Optional[DocumentLoader] = None,
) -> List[CheckResult]:
    """Check instance files against the ``format`` of a schema file.

    Loading problems are reported as errors on the affected result instead of
    aborting the whole run.

    Args:
        schema_path: Path to the schema document
        instance_paths: Paths to the instance documents
        config: Configuration to use (default: global configuration)
        loader: Document loader to use (default: new loader)

    Returns:
        List of CheckResult objects, one per instance file
    """
    config = config or validator_config
    loader = loader or DocumentLoader(config.cache_enabled, config.max_cache_size)

    try:
        schema = loader.load_schema(schema_path, draft=config.draft)
    except FormatValidatorError as e:
        logger.error(f"Failed to load schema {schema_path}: {e}")
        return [CheckResult(schema_path, _failure(config.new_report(), 'schema', e))]

    processor = build_validation_processor(draft=config.draft)
    results = []

    for instance_path in instance_paths:
        report = config.new_report()
        logger.info(f"Checking {instance_path} against {schema_path}")
        try:
            instance = loader.load_document(instance_path)
            data = ValidationData(SchemaTree(schema), JsonTree(instance))
            processor.process(report, data)
        except ProcessingError:
            raise
        except DocumentLoadError as e:
            _failure(report, 'instance', e)
        except FormatValidatorError as e:
            _failure(report, 'schema', e)
        results.append(CheckResult(instance_path, report))

    return results
