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

"""YAML manifest parser producing canonical JSON-shaped data."""

import base64
import datetime
import json
import logging
import re
from typing import Any, Dict, List, Tuple

import yaml
from yaml.constructor import ConstructorError

from ..utils.source_location import SourceMap, join_pointer

logger = logging.getLogger(__name__)

BOOL_TAG = 'tag:yaml.org,2002:bool'
TIMESTAMP_TAG = 'tag:yaml.org,2002:timestamp'

# https://yaml.org/type/bool.html
TRUE_LITERALS = frozenset(['y', 'Y', 'yes', 'Yes', 'YES', 'true', 'True', 'TRUE', 'on', 'On', 'ON'])
FALSE_LITERALS = frozenset(['n', 'N', 'no', 'No', 'NO', 'false', 'False', 'FALSE', 'off', 'Off', 'OFF'])

BOOL_PATTERN = re.compile(
    r'^(?:y|Y|yes|Yes|YES|n|N|no|No|NO'
    r'|true|True|TRUE|false|False|FALSE'
    r'|on|On|ON|off|Off|OFF)$'
)


def _manifest_resolvers() -> Dict[Any, List[Tuple[str, re.Pattern]]]:
    """Implicit resolver table with the YAML 1.1 bool set checked first.

    PyYAML's own bool resolver misses ``y``/``n`` and its timestamp resolver
    turns dates into objects JSON cannot hold, so both are dropped.
    """
    table: Dict[Any, List[Tuple[str, re.Pattern]]] = {
        first: [(BOOL_TAG, BOOL_PATTERN)] for first in 'yYnNtTfFoO'
    }
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items():
        kept = [(tag, regexp) for tag, regexp in resolvers if tag not in (BOOL_TAG, TIMESTAMP_TAG)]
        table.setdefault(first, []).extend(kept)
    return table


class ManifestLoader(yaml.SafeLoader):
    """SafeLoader that resolves every YAML 1.1 boolean literal to a bool."""

    def construct_yaml_bool(self, node):
        value = self.construct_scalar(node)
        if value in TRUE_LITERALS:
            return True
        if value in FALSE_LITERALS:
            return False
        raise ConstructorError(
            None, None, f"expected a boolean literal, but found {value!r}", node.start_mark
        )


ManifestLoader.yaml_implicit_resolvers = _manifest_resolvers()
ManifestLoader.add_constructor(BOOL_TAG, ManifestLoader.construct_yaml_bool)


def canonical_key(key: Any) -> str:
    """Spell a mapping key the way a JSON serializer would."""
    if isinstance(key, str):
        return key
    if isinstance(key, (datetime.date, datetime.datetime)):
        return key.isoformat()
    if isinstance(key, (bool, int, float)) or key is None:
        return json.dumps(key)
    if isinstance(key, bytes):
        return base64.b64encode(key).decode('ascii')
    return str(key)


def to_document_tree(value: Any) -> Any:
    """Convert constructed YAML data into the canonical JSON document shape.

    Raises:
        ValueError: If the data refers to itself through an alias
    """
    return _to_document_tree(value, set())


def _to_document_tree(value: Any, active: set) -> Any:
    if isinstance(value, (dict, list, tuple, set)):
        if id(value) in active:
            raise ValueError("recursive alias cannot be represented as a JSON document")
        active.add(id(value))
        try:
            if isinstance(value, dict):
                return {canonical_key(k): _to_document_tree(v, active) for k, v in value.items()}
            return [_to_document_tree(item, active) for item in value]
        finally:
            active.discard(id(value))

    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode('ascii')
    return value


def _build_source_map(loader: ManifestLoader, root) -> SourceMap:
    """Map JSON pointers of the composed node tree to 1-based line/column."""
    source_map: SourceMap = {}

    def _record(path: str, node) -> None:
        mark = getattr(node, "start_mark", None)
        if mark is None:
            return
        # PyYAML uses 0-based line/column
        source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

    def _walk(node, path: str, active: set) -> None:
        _record(path, node)
        if id(node) in active:
            return

        if isinstance(node, yaml.nodes.MappingNode):
            active.add(id(node))
            for key_node, value_node in node.value:
                if not isinstance(key_node, yaml.nodes.ScalarNode):
                    continue
                key = canonical_key(loader.construct_object(key_node))
                _walk(value_node, join_pointer(path, key), active)
            active.discard(id(node))
        elif isinstance(node, yaml.nodes.SequenceNode):
            active.add(id(node))
            for idx, item_node in enumerate(node.value):
                _walk(item_node, join_pointer(path, idx), active)
            active.discard(id(node))

    _walk(root, "", set())
    return source_map


def load_yaml_with_source(content: str) -> Tuple[Any, SourceMap]:
    """Parse YAML text into (canonical data, source_map).

    The node tree is composed once; construction and the source map both
    read it, so merge keys and aliases resolve to the same positions the
    data came from.

    Raises:
        yaml.YAMLError: If the content cannot be parsed or constructed
        ValueError: If the content is empty or cannot be represented as JSON
    """
    loader = ManifestLoader(content)
    try:
        root = loader.get_single_node()
        if root is None:
            raise ValueError("manifest is empty")
        data = loader.construct_document(root)
        source_map = _build_source_map(loader, root)
    finally:
        loader.dispose()

    logger.debug(f"Parsed YAML document with {len(source_map)} located nodes")
    return to_document_tree(data), source_map


def describe_yaml_error(exc: yaml.YAMLError) -> str:
    """Render a YAML error without the stream name PyYAML embeds."""
    if isinstance(exc, yaml.MarkedYAMLError) and exc.problem_mark is not None:
        problem = exc.problem or exc.context or "invalid YAML"
        mark = exc.problem_mark
        return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
    return str(exc)
