from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from jsonschema.exceptions import ValidationError
from jsonschema.validators import extend, validator_for

from ..utils.source_location import json_pointer
from .manifest import ManifestDocument
from .schema_loader import Schema

logger = logging.getLogger(__name__)

JsonPointer = str


class ErrorType(str, Enum):
    """Classification of a failed schema keyword."""

    ADDITIONAL_ITEMS = "AdditionalItems"
    ADDITIONAL_PROPERTIES = "AdditionalProperties"
    ALL_OF = "AllOf"
    ANY_OF = "AnyOf"
    CONST = "Const"
    CONTAINS = "Contains"
    DEPENDENCIES = "Dependencies"
    DEPENDENT_REQUIRED = "DependentRequired"
    DEPENDENT_SCHEMAS = "DependentSchemas"
    DISALLOW = "Disallow"
    ENUM = "Enum"
    EXTENDS = "Extends"
    EXCLUSIVE_MAXIMUM = "ExclusiveMaximum"
    EXCLUSIVE_MINIMUM = "ExclusiveMinimum"
    FORMAT = "Format"
    ITEMS = "Items"
    MAXIMUM = "Maximum"
    MAXIMUM_CONTAINS = "MaximumContains"
    MAXIMUM_ITEMS = "MaximumItems"
    MAXIMUM_LENGTH = "MaximumLength"
    MAXIMUM_PROPERTIES = "MaximumProperties"
    MINIMUM = "Minimum"
    MINIMUM_CONTAINS = "MinimumContains"
    MINIMUM_ITEMS = "MinimumItems"
    MINIMUM_LENGTH = "MinimumLength"
    MINIMUM_PROPERTIES = "MinimumProperties"
    MULTIPLE_OF = "MultipleOf"
    NOT = "Not"
    ONE_OF = "OneOf"
    PATTERN = "Pattern"
    PATTERN_PROPERTIES = "PatternProperties"
    PREFIX_ITEMS = "PrefixItems"
    PROPERTIES = "Properties"
    PROPERTY_NAMES = "PropertyNames"
    REQUIRED = "Required"
    TYPE = "Type"
    UNEVALUATED_ITEMS = "UnevaluatedItems"
    UNEVALUATED_PROPERTIES = "UnevaluatedProperties"
    UNIQUE_ITEMS = "UniqueItems"
    # A ``false`` schema rejected the value
    VALID = "Valid"
    OTHER = "Other"

    @classmethod
    def from_keyword(cls, keyword: Optional[str]) -> 'ErrorType':
        if keyword is None:
            return cls.VALID
        return _KEYWORD_ERROR_TYPES.get(keyword, cls.OTHER)


_KEYWORD_ERROR_TYPES = {
    "additionalItems": ErrorType.ADDITIONAL_ITEMS,
    "additionalProperties": ErrorType.ADDITIONAL_PROPERTIES,
    "allOf": ErrorType.ALL_OF,
    "anyOf": ErrorType.ANY_OF,
    "const": ErrorType.CONST,
    "contains": ErrorType.CONTAINS,
    "dependencies": ErrorType.DEPENDENCIES,
    "dependentRequired": ErrorType.DEPENDENT_REQUIRED,
    "dependentSchemas": ErrorType.DEPENDENT_SCHEMAS,
    "disallow": ErrorType.DISALLOW,
    "enum": ErrorType.ENUM,
    "extends": ErrorType.EXTENDS,
    "exclusiveMaximum": ErrorType.EXCLUSIVE_MAXIMUM,
    "exclusiveMinimum": ErrorType.EXCLUSIVE_MINIMUM,
    "format": ErrorType.FORMAT,
    "items": ErrorType.ITEMS,
    "maximum": ErrorType.MAXIMUM,
    "maxContains": ErrorType.MAXIMUM_CONTAINS,
    "maxItems": ErrorType.MAXIMUM_ITEMS,
    "maxLength": ErrorType.MAXIMUM_LENGTH,
    "maxProperties": ErrorType.MAXIMUM_PROPERTIES,
    "minimum": ErrorType.MINIMUM,
    "minContains": ErrorType.MINIMUM_CONTAINS,
    "minItems": ErrorType.MINIMUM_ITEMS,
    "minLength": ErrorType.MINIMUM_LENGTH,
    "minProperties": ErrorType.MINIMUM_PROPERTIES,
    "multipleOf": ErrorType.MULTIPLE_OF,
    "not": ErrorType.NOT,
    "oneOf": ErrorType.ONE_OF,
    "pattern": ErrorType.PATTERN,
    "patternProperties": ErrorType.PATTERN_PROPERTIES,
    "prefixItems": ErrorType.PREFIX_ITEMS,
    "properties": ErrorType.PROPERTIES,
    "propertyNames": ErrorType.PROPERTY_NAMES,
    "required": ErrorType.REQUIRED,
    "type": ErrorType.TYPE,
    "unevaluatedItems": ErrorType.UNEVALUATED_ITEMS,
    "unevaluatedProperties": ErrorType.UNEVALUATED_PROPERTIES,
    "uniqueItems": ErrorType.UNIQUE_ITEMS,
}


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based
    schema_id: str = "#"
    error_type: ErrorType = ErrorType.OTHER
    yaml_path: Optional[JsonPointer] = None
    children: Tuple["SchemaIssue", ...] = ()

    def walk(self, depth: int = 1) -> Iterable[Tuple[int, "SchemaIssue"]]:
        """Yield (depth, issue) for this issue and its descendants, pre-order."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)


def _all_of(validator, all_of, instance, schema):
    """``allOf`` that nests every branch failure under a single error."""
    errors = []
    for index, subschema in enumerate(all_of):
        errors.extend(validator.descend(instance, subschema, schema_path=index))
    if errors:
        yield ValidationError(
            f"{instance!r} is not valid under all of the given schemas",
            context=errors,
        )


@lru_cache(maxsize=None)
def _collecting_validator(validator_class):
    if "allOf" not in validator_class.VALIDATORS:
        return validator_class
    return extend(validator_class, {"allOf": _all_of})


def create_validator(schema: Schema):
    """Create a jsonschema validator for the dialect the schema declares."""
    base_class = validator_for(schema)
    validator_class = _collecting_validator(base_class)
    return validator_class(schema, format_checker=base_class.FORMAT_CHECKER)


def _schema_id(error: ValidationError) -> str:
    path = list(error.absolute_schema_path)
    if path and path[-1] == error.validator:
        path = path[:-1]
    return "#" + json_pointer(path)


def _to_issue(error: ValidationError, document: ManifestDocument) -> SchemaIssue:
    loc = document.locate(json_pointer(error.absolute_path))
    return SchemaIssue(
        message=error.message,
        line=loc.line,
        column=loc.column,
        schema_id=_schema_id(error),
        error_type=ErrorType.from_keyword(error.validator),
        yaml_path=loc.yaml_path,
        children=tuple(_to_issue(child, document) for child in error.context or ()),
    )


def validate_against_schema(schema: Schema, document: ManifestDocument) -> List[SchemaIssue]:
    """Validate a normalized manifest against a schema.

    Every violation is collected; composition keywords (``anyOf``, ``oneOf``,
    ``allOf``) report their branch failures as children, in the order the
    branches are declared.

    Args:
        schema: Parsed JSON Schema
        document: Normalized manifest

    Returns:
        Top-level issues ordered by source position; empty if the manifest
        conforms to the schema
    """
    validator = create_validator(schema)
    issues = [_to_issue(error, document) for error in validator.iter_errors(document.data)]
    issues.sort(key=lambda issue: (issue.line or 0, issue.column or 0))

    logger.debug(f"{document.file_path.name}: {len(issues)} top-level schema issue(s)")
    return issues
