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

"""Manifest normalization: JSON or YAML file to canonical document."""

import json
import logging
from pathlib import Path
from typing import Union

import yaml

from ..exceptions import ManifestNotFound, ManifestParseError
from ..models.manifest import ManifestDocument, ManifestFormat
from .json_parser import load_json_with_source
from .yaml_parser import describe_yaml_error, load_yaml_with_source

logger = logging.getLogger(__name__)


class ManifestParser:
    """Reads manifests from disk into :class:`ManifestDocument` objects.

    Nothing is cached: every call re-reads the file, so consecutive runs
    always see the current content.
    """

    def parse(self, file_path: Union[str, Path]) -> ManifestDocument:
        """Load and normalize a manifest file.

        Args:
            file_path: Path to a ``.json``, ``.yml`` or ``.yaml`` manifest

        Returns:
            The normalized document with its source map

        Raises:
            ManifestNotFound: If the file doesn't exist
            ManifestParseError: If the file cannot be read, decoded or parsed
        """
        path = Path(file_path)

        if not path.is_file():
            raise ManifestNotFound(path.name)

        manifest_format = ManifestFormat.from_path(path)
        logger.debug(f"Loading {manifest_format.value} manifest: {path}")

        try:
            # utf-8-sig: editors on Windows commonly save manifests with a BOM
            content = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ManifestParseError(path.name, str(exc)) from exc
        except OSError as exc:
            raise ManifestParseError(path.name, exc.strerror or str(exc)) from exc

        if manifest_format is ManifestFormat.YAML:
            try:
                data, source_map = load_yaml_with_source(content)
            except yaml.YAMLError as exc:
                raise ManifestParseError(path.name, describe_yaml_error(exc)) from exc
            except ValueError as exc:
                raise ManifestParseError(path.name, str(exc)) from exc
        else:
            try:
                data, source_map = load_json_with_source(content)
            except json.JSONDecodeError as exc:
                raise ManifestParseError(path.name, str(exc)) from exc

        return ManifestDocument(
            file_path=path,
            format=manifest_format,
            data=data,
            source_map=source_map,
        )


# Global parser instance
manifest_parser = ManifestParser()


def normalize_manifest(file_path: Union[str, Path]) -> ManifestDocument:
    """Normalize a manifest file into the canonical document tree."""
    return manifest_parser.parse(file_path)
