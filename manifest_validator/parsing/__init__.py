"""Manifest parsing into the canonical document tree."""

from .manifest_parser import ManifestParser, manifest_parser, normalize_manifest
from .yaml_parser import ManifestLoader, to_document_tree

__all__ = [
    'ManifestLoader',
    'ManifestParser',
    'manifest_parser',
    'normalize_manifest',
    'to_document_tree',
]
