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

"""Normalized manifest document model."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

from ..utils.source_location import SourceLocation, SourceMap, lookup_source


class ManifestFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_path(cls, file_path: Union[str, Path]) -> 'ManifestFormat':
        """Detect the manifest format from the file extension (case sensitive)."""
        if Path(file_path).suffix in ('.yml', '.yaml'):
            return cls.YAML
        return cls.JSON


@dataclass(frozen=True)
class ManifestDocument:
    """A manifest in canonical JSON shape, independent of its source format.

    ``data`` only ever holds dict (str keys, insertion ordered), list, str,
    int, float, bool and None. ``source_map`` maps JSON pointers to the
    1-based line/column where each value starts in ``file_path``.
    """
    file_path: Path
    format: ManifestFormat
    data: Any
    source_map: SourceMap = field(default_factory=dict, compare=False, repr=False)

    def locate(self, pointer: str) -> SourceLocation:
        loc = lookup_source(self.source_map, pointer)
        return SourceLocation(
            file_path=self.file_path,
            yaml_path=loc.yaml_path,
            line=loc.line,
            column=loc.column,
        )
