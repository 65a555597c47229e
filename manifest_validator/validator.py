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

"""Manifest validation against a single schema."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .config import ValidatorConfig
from .exceptions import FileMissingError, DocumentParseError, ManifestValidatorError
from .models.manifest import ManifestDocument
from .models.schema_loader import Schema, SchemaLoader
from .models.schema_validator import SchemaIssue, validate_against_schema
from .parsing.manifest_parser import normalize_manifest
from .report import ErrorReporter

logger = logging.getLogger(__name__)


class ManifestValidator:
    """Validates manifests against one schema, loaded lazily and only once.

    ``errors`` holds the diagnostics of the most recent :meth:`validate`
    call. Concurrent validations need one instance each; the loaded schema
    itself is never mutated and may be shared.
    """

    def __init__(self, schema_file: Union[str, Path], config: Optional[ValidatorConfig] = None):
        self.schema_file = Path(schema_file)
        self.config = config or ValidatorConfig()
        self.manifest_file: Optional[Path] = None
        self.manifest: Optional[ManifestDocument] = None
        self.issues: List[SchemaIssue] = []
        self.schema_error: Optional[ManifestValidatorError] = None

        self._schema: Optional[Schema] = None
        self._schema_loader = SchemaLoader()
        self._reporter = ErrorReporter(ci=self.config.ci)

    @property
    def schema(self) -> Schema:
        """The parsed schema, loaded on first access.

        Raises:
            SchemaNotFound: If the schema file doesn't exist
            SchemaParseError: If the schema cannot be parsed
        """
        if self.schema_error is not None:
            raise self.schema_error
        if self._schema is None:
            try:
                self._schema = self._schema_loader.load(self.schema_file)
            except (FileMissingError, DocumentParseError) as exc:
                self.schema_error = exc
                raise
        return self._schema

    @property
    def schema_failed(self) -> bool:
        return self.schema_error is not None

    @property
    def errors(self) -> List[str]:
        return self._reporter.diagnostics

    @property
    def errors_as_string(self) -> str:
        return "\n".join(self.errors)

    def validate(self, manifest_file: Union[str, Path]) -> bool:
        """Validate one manifest file.

        Load failures of the schema or the manifest become a single
        diagnostic and skip schema validation; schema violations are all
        collected.

        Args:
            manifest_file: Path to a JSON or YAML manifest

        Returns:
            True if the manifest conforms to the schema
        """
        self.manifest_file = Path(manifest_file)
        self.manifest = None
        self.issues = []
        self._reporter.clear()

        try:
            schema = self.schema
            self.manifest = normalize_manifest(self.manifest_file)
        except (FileMissingError, DocumentParseError) as exc:
            logger.debug(f"Skipping validation of {self.manifest_file}: {exc}")
            self._reporter.report_failure(exc)
            return False

        self.issues = validate_against_schema(schema, self.manifest)
        if not self.issues:
            return True

        self._reporter.report(self.issues, self.manifest_file.resolve())
        return not self.errors
