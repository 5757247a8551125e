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

"""JSON/YAML document loader with caching support."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from jsonschema import Draft3Validator, Draft4Validator
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from ..config import validator_config
from ..exceptions import DocumentLoadError, SchemaStructureError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}

# Meta-schema used when a schema does not declare "$schema".
_DEFAULT_VALIDATORS = {
    "draftv4": Draft4Validator,
    "draftv3": Draft3Validator,
}


class JsonCompatibleLoader(yaml.SafeLoader):
    """Safe YAML loader keeping timestamps as strings.

    JSON has no date type; a ``date-time`` value written in YAML must reach the
    format check as the string the user wrote. Tags building values JSON cannot
    hold (``!!binary``, ``!!set``) are load errors.
    """

    def construct_non_json(self, node: yaml.Node) -> Any:
        raise yaml.constructor.ConstructorError(
            None, None, f"tag '{node.tag}' has no JSON equivalent", node.start_mark
        )


JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [r for r in resolvers if r[0] != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
for _tag in ("tag:yaml.org,2002:binary", "tag:yaml.org,2002:set", "tag:yaml.org,2002:timestamp"):
    JsonCompatibleLoader.add_constructor(_tag, JsonCompatibleLoader.construct_non_json)


class DocumentLoader:
    """Load JSON or YAML documents, keeping parsed documents in a cache."""

    def __init__(self, cache_enabled: Optional[bool] = None, max_cache_size: Optional[int] = None):
        """Initialize the loader.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
            max_cache_size: Maximum cached documents. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else validator_config.cache_enabled
        self.max_cache_size = max_cache_size if max_cache_size is not None else validator_config.max_cache_size
        self._cache: Dict[Path, Any] = {}

    def load_document(self, file_path: Union[str, Path]) -> Any:
        """Load a JSON (``.json``) or YAML (``.yaml``/``.yml``) document.

        Raises:
            DocumentLoadError: If the file is missing, has an unknown suffix or
                does not parse.
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        suffix = path.suffix.lower()
        logger.debug(f"Loading document: {path}")
        try:
            content = path.read_text(encoding="utf-8")
            if suffix in JSON_SUFFIXES:
                document = json.loads(content)
            elif suffix in YAML_SUFFIXES:
                document = yaml.load(content, Loader=JsonCompatibleLoader)
            else:
                raise DocumentLoadError(
                    f"Unsupported document type '{suffix}' for {path}. "
                    f"Expected one of: {sorted(JSON_SUFFIXES | YAML_SUFFIXES)}"
                )
        except json.JSONDecodeError as e:
            raise DocumentLoadError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno}, column {e.colno})") from e
        except yaml.YAMLError as e:
            raise DocumentLoadError(f"Invalid YAML in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(f"Failed to read {path}: {e}") from e

        # A size of zero or less disables caching.
        if self.cache_enabled and self.max_cache_size > 0:
            if len(self._cache) >= self.max_cache_size:
                # Drop the oldest entry.
                self._cache.pop(next(iter(self._cache)))
            self._cache[path] = document

        return document

    def load_schema(self, file_path: Union[str, Path], draft: str = "draftv4") -> Any:
        """Load a schema document and check it against its meta-schema.

        Raises:
            DocumentLoadError: If the document cannot be loaded.
            SchemaStructureError: If the schema is invalid for its draft.
        """
        schema = self.load_document(file_path)
        check_schema(schema, draft=draft, source=str(file_path))
        return schema

    def clear_cache(self) -> None:
        """Clear the document cache. Useful for testing."""
        self._cache.clear()


def check_schema(schema: Any, draft: str = "draftv4", source: str = "<schema>") -> None:
    """Check *schema* against the meta-schema of its ``$schema`` (or *draft*).

    Raises:
        SchemaStructureError: If the schema does not satisfy its meta-schema.
    """
    if draft not in _DEFAULT_VALIDATORS:
        raise ValueError(f"Unknown draft: '{draft}'. Valid drafts: {list(_DEFAULT_VALIDATORS)}")

    validator_cls = validator_for(schema, default=_DEFAULT_VALIDATORS[draft])
    try:
        validator_cls.check_schema(schema)
    except SchemaError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else ""
        raise SchemaStructureError(f"Invalid schema {source} at '{path}': {e.message}") from e


document_loader = DocumentLoader()
