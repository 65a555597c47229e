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

"""JSON Schema loader for manifest validation."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from ..exceptions import SchemaNotFound, SchemaParseError

logger = logging.getLogger(__name__)

Schema = Union[Dict[str, Any], bool]


class SchemaLoader:
    """Loads schema documents, parsing each file at most once."""

    def __init__(self):
        self._cache: Dict[Path, Schema] = {}

    def load(self, file_path: Union[str, Path]) -> Schema:
        """Load and check a JSON Schema file.

        Args:
            file_path: Path to the schema document

        Returns:
            Schema dictionary

        Raises:
            SchemaNotFound: If the schema file doesn't exist
            SchemaParseError: If the file is not valid JSON or not a valid schema
        """
        path = Path(file_path).resolve()

        if path in self._cache:
            logger.debug(f"Loading schema from cache: {path}")
            return self._cache[path]

        if not path.is_file():
            raise SchemaNotFound(path.name)

        logger.debug(f"Loading schema file: {path}")
        try:
            schema = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SchemaParseError(path.name, str(e)) from e
        except UnicodeDecodeError as e:
            raise SchemaParseError(path.name, str(e)) from e
        except OSError as e:
            raise SchemaParseError(path.name, e.strerror or str(e)) from e

        if not isinstance(schema, (dict, bool)):
            raise SchemaParseError(
                path.name, f"Schema must be an object or a boolean, got {type(schema).__name__}"
            )

        try:
            validator_for(schema).check_schema(schema)
        except SchemaError as e:
            raise SchemaParseError(path.name, e.message) from e

        self._cache[path] = schema
        return schema

    def clear_cache(self) -> None:
        """Clear the schema cache."""
        self._cache.clear()
        logger.debug("Schema cache cleared")
