"""
Request validation package.

Declarative schemas and the FastAPI dependency that applies them
to one section of an inbound request.
"""

from authapi.shared.validation.pipeline import ValidationSource, validate
from authapi.shared.validation.schema import (
    Boolean,
    Check,
    Email,
    Field,
    Integer,
    Number,
    PydanticSchema,
    Schema,
    SchemaViolation,
    String,
    ValidationIssue,
    at_least,
    at_most,
    matches,
    max_length,
    min_length,
    one_of,
)

__all__ = [
    "Boolean",
    "Check",
    "Email",
    "Field",
    "Integer",
    "Number",
    "PydanticSchema",
    "Schema",
    "SchemaViolation",
    "String",
    "ValidationIssue",
    "ValidationSource",
    "at_least",
    "at_most",
    "matches",
    "max_length",
    "min_length",
    "one_of",
    "validate",
]
