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

"""Custom exceptions for the manifest validator."""


class ManifestValidatorError(Exception):
    """Base exception for manifest-validator related errors."""
    pass


class FileMissingError(ManifestValidatorError):
    """Exception raised when a required input file does not exist."""

    kind = "Input"

    def __init__(self, file: str):
        self.file = file
        super().__init__(f"{self.kind} file not found: {file}")


class SchemaNotFound(FileMissingError):
    """Exception raised when the schema file does not exist."""

    kind = "Schema"


class ManifestNotFound(FileMissingError):
    """Exception raised when a manifest file does not exist."""

    kind = "Manifest"


class DocumentParseError(ManifestValidatorError):
    """Exception raised when a document cannot be parsed.

    Only the base name of the file is recorded so that diagnostics stay
    identical across checkouts and CI runners.
    """

    def __init__(self, file: str, message: str):
        self.file = file
        self.message = message
        super().__init__(f"{file}: {message}")


class SchemaParseError(DocumentParseError):
    """Exception raised for malformed JSON or invalid schema documents."""
    pass


class ManifestParseError(DocumentParseError):
    """Exception raised for malformed JSON or YAML manifests."""
    pass
