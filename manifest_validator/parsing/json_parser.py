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

"""JSON manifest parser with value positions."""

import json
import re
from bisect import bisect_right
from json.decoder import scanstring
from json.scanner import NUMBER_RE
from typing import Any, Tuple

from ..utils.source_location import SourceMap, join_pointer

_WHITESPACE = re.compile(r'[ \t\n\r]*')
_LITERALS = ('true', 'false', 'null', 'NaN', 'Infinity', '-Infinity')


def _build_source_map_from_json(content: str) -> SourceMap:
    """Build a mapping from JSON pointers to 1-based line/column.

    ``content`` must already have been accepted by :func:`json.loads`; the
    scan only tracks where each value starts.
    """
    source_map: SourceMap = {}
    line_starts = [0] + [m.end() for m in re.finditer('\n', content)]

    def _skip(idx: int) -> int:
        return _WHITESPACE.match(content, idx).end()

    def _record(path: str, idx: int) -> None:
        line = bisect_right(line_starts, idx)
        source_map[path] = {"line": line, "column": idx - line_starts[line - 1] + 1}

    def _walk(idx: int, path: str) -> int:
        idx = _skip(idx)
        _record(path, idx)
        char = content[idx]

        if char == '{':
            idx = _skip(idx + 1)
            if content[idx] == '}':
                return idx + 1
            while True:
                key, idx = scanstring(content, idx + 1)
                idx = _skip(idx)
                idx = _skip(_walk(idx + 1, join_pointer(path, key)))
                if content[idx] == ',':
                    idx = _skip(idx + 1)
                    continue
                return idx + 1

        if char == '[':
            idx = _skip(idx + 1)
            if content[idx] == ']':
                return idx + 1
            position = 0
            while True:
                idx = _skip(_walk(idx, join_pointer(path, position)))
                position += 1
                if content[idx] == ',':
                    idx += 1
                    continue
                return idx + 1

        if char == '"':
            _, idx = scanstring(content, idx + 1)
            return idx

        for literal in _LITERALS:
            if content.startswith(literal, idx):
                return idx + len(literal)

        match = NUMBER_RE.match(content, idx)
        return match.end()

    _walk(0, "")
    return source_map


def load_json_with_source(content: str) -> Tuple[Any, SourceMap]:
    """Parse JSON text into (data, source_map).

    Raises:
        json.JSONDecodeError: If the content is not valid JSON
    """
    data = json.loads(content)
    return data, _build_source_map_from_json(content)
