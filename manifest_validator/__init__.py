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

"""Validate JSON and YAML manifests against a JSON Schema."""

__version__ = "0.1.0"

from .config import ValidatorConfig
from .exceptions import (
    ManifestNotFound,
    ManifestParseError,
    ManifestValidatorError,
    SchemaNotFound,
    SchemaParseError,
)
from .models.schema_validator import ErrorType, SchemaIssue, validate_against_schema
from .parsing import normalize_manifest
from .report import ErrorReporter
from .validator import ManifestValidator

__all__ = [
    'ErrorReporter',
    'ErrorType',
    'ManifestNotFound',
    'ManifestParseError',
    'ManifestValidator',
    'ManifestValidatorError',
    'SchemaIssue',
    'SchemaNotFound',
    'SchemaParseError',
    'ValidatorConfig',
    'normalize_manifest',
    'validate_against_schema',
]
