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

"""Diagnostic formatting for schema issues."""

from pathlib import Path
from typing import Iterable, List, Union

from .exceptions import DocumentParseError, ManifestValidatorError
from .models.schema_validator import SchemaIssue
from .utils.source_location import SourceLocation, format_source


class ErrorReporter:
    """Flattens schema issue trees into diagnostic strings.

    Plain mode is meant for people reading a terminal, CI mode for build
    logs. The mode is fixed at construction.
    """

    def __init__(self, ci: bool = False):
        self.ci = ci
        self.diagnostics: List[str] = []

    def clear(self):
        """Drop the diagnostics of the previous run."""
        self.diagnostics.clear()

    def report(self, issues: Iterable[SchemaIssue], manifest_path: Union[str, Path]) -> List[str]:
        """Format issues depth-first, parents before their children.

        Args:
            issues: Top-level issues; children are visited recursively
            manifest_path: Path shown on the ``Line:`` row of every diagnostic

        Returns:
            The accumulated diagnostics
        """
        for issue in issues:
            for depth, node in issue.walk():
                self.diagnostics.append(self._format(node, depth, Path(manifest_path)))
        return self.diagnostics

    def report_failure(self, exc: ManifestValidatorError) -> List[str]:
        """Record a schema or manifest load failure as a single diagnostic.

        Only parse failures carry the CI marker; not-found messages are bare.
        """
        prefix = "    [*] " if self.ci and isinstance(exc, DocumentParseError) else ""
        self.diagnostics.append(f"{prefix}{exc}")
        return self.diagnostics

    def _format(self, issue: SchemaIssue, depth: int, manifest_path: Path) -> str:
        indent = " " * (depth * 2)
        head = "[*] " if self.ci else "- "
        detail = "  [^] " if self.ci else "  "
        loc = SourceLocation(file_path=manifest_path, line=issue.line, column=issue.column)

        text = (
            f"{indent}{head}Error: {issue.message}\n"
            f"{indent}{detail}Line: {format_source(loc)}\n"
            f"{indent}{detail}Path: {issue.schema_id}/{issue.error_type.value}"
        )
        if not self.ci:
            text += "\n"
        return text
