"""Schema loading, manifest model and structural validation.

This package does not depend on the command line or on output formatting.
"""

from .manifest import ManifestDocument, ManifestFormat
from .schema_loader import SchemaLoader
from .schema_validator import ErrorType, SchemaIssue, validate_against_schema
