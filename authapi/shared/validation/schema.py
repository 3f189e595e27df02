"""
Declarative request schemas.

A Schema is an ordered list of Fields. Each Field names a key, its type,
whether it is required, and the checks its value must pass. ``parse`` is
a pure function of its input: it returns a new, normalized mapping or
raises SchemaViolation listing every issue in declaration order.

Example:
    LoginSchema = Schema(
        Field("email", Email(), message="Invalid email address"),
        Field("password", String(), checks=(min_length(1, "Password is required"),)),
    )
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

# Mirrors the HTML5 email grammar, which is what browsers accept.
EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$"
)
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class ValidationIssue:
    """One schema violation. ``field`` is empty for whole-payload issues."""

    field: str
    message: str


class SchemaViolation(Exception):
    """Raised by ``Schema.parse`` with every issue found, in order."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = list(issues)
        super().__init__(", ".join(self.messages))

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]


class TypeMismatch(Exception):
    """Raised by a FieldType when a value cannot be read as that type."""


@dataclass(frozen=True)
class Check:
    """A predicate over an already-typed value.

    ``message`` may contain ``{field}``, replaced by the field name.
    """

    predicate: Callable[[Any], bool]
    message: str


def min_length(n: int, message: Optional[str] = None) -> Check:
    return Check(
        lambda v: len(v) >= n,
        message or f"{{field}} must be at least {n} characters",
    )


def max_length(n: int, message: Optional[str] = None) -> Check:
    return Check(
        lambda v: len(v) <= n,
        message or f"{{field}} must be at most {n} characters",
    )


def matches(pattern: str, message: Optional[str] = None) -> Check:
    compiled = re.compile(pattern)
    return Check(
        lambda v: compiled.fullmatch(v) is not None,
        message or "{field} has an invalid format",
    )


def at_least(n: float, message: Optional[str] = None) -> Check:
    return Check(lambda v: v >= n, message or f"{{field}} must be at least {n}")


def at_most(n: float, message: Optional[str] = None) -> Check:
    return Check(lambda v: v <= n, message or f"{{field}} must be at most {n}")


def one_of(choices, message: Optional[str] = None) -> Check:
    allowed = tuple(choices)
    listed = ", ".join(str(c) for c in allowed)
    return Check(
        lambda v: v in allowed, message or f"{{field}} must be one of: {listed}"
    )


class FieldType:
    """Base class for field types. Subclasses implement ``parse``."""

    label = "value"

    def parse(self, value: Any, coerce: bool) -> Any:
        raise NotImplementedError

    def intrinsic_checks(self) -> tuple[Check, ...]:
        return ()


@dataclass(frozen=True)
class String(FieldType):
    """A string, trimmed by default."""

    trim: bool = True
    lower: bool = False
    label = "string"

    def parse(self, value: Any, coerce: bool) -> str:
        if not isinstance(value, str):
            raise TypeMismatch
        if self.trim:
            value = value.strip()
        if self.lower:
            value = value.lower()
        return value


@dataclass(frozen=True)
class Email(String):
    """A trimmed string holding one email address."""

    label = "email"

    def intrinsic_checks(self) -> tuple[Check, ...]:
        return (
            Check(
                lambda v: EMAIL_PATTERN.match(v) is not None,
                "{field} must be a valid email address",
            ),
        )


@dataclass(frozen=True)
class Integer(FieldType):
    label = "integer"

    def parse(self, value: Any, coerce: bool) -> int:
        if isinstance(value, bool):
            raise TypeMismatch
        if isinstance(value, int):
            return value
        if coerce and isinstance(value, str) and INTEGER_PATTERN.match(value.strip()):
            return int(value.strip())
        raise TypeMismatch


@dataclass(frozen=True)
class Number(FieldType):
    label = "number"

    def parse(self, value: Any, coerce: bool) -> float:
        if isinstance(value, bool):
            raise TypeMismatch
        if isinstance(value, (int, float)):
            return value
        if coerce and isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError as exc:
                raise TypeMismatch from exc
        raise TypeMismatch


@dataclass(frozen=True)
class Boolean(FieldType):
    label = "boolean"

    def parse(self, value: Any, coerce: bool) -> bool:
        if isinstance(value, bool):
            return value
        if coerce and isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_STRINGS:
                return True
            if lowered in FALSE_STRINGS:
                return False
        raise TypeMismatch


_MISSING = object()


@dataclass(frozen=True)
class Field:
    """One key of a Schema.

    Attributes:
        name: Key in the request section (lower-case for headers).
        type: How the raw value is read and normalized.
        required: Whether an absent or null value is an issue.
        checks: Extra constraints, evaluated in order; all failures reported.
        message: Overrides the missing, wrong-type and type-intrinsic messages.
        default: Value used when an optional field is absent.
    """

    name: str
    type: FieldType = field(default_factory=String)
    required: bool = True
    checks: tuple[Check, ...] = ()
    message: Optional[str] = None
    default: Any = _MISSING

    def _text(self, template: str) -> str:
        return template.replace("{field}", self.name)

    def evaluate(self, data: Mapping[str, Any], coerce: bool):
        """Return ``(present, value, issues)`` for this field."""
        raw = data.get(self.name)
        if raw is None:
            if self.required:
                return False, None, [
                    ValidationIssue(self.name, self.message or f"{self.name} is required")
                ]
            if self.default is not _MISSING:
                return True, self.default, []
            return False, None, []

        try:
            value = self.type.parse(raw, coerce)
        except TypeMismatch:
            text = self.message or f"{self.name} must be a valid {self.type.label}"
            return False, None, [ValidationIssue(self.name, text)]

        issues = [
            ValidationIssue(self.name, self._text(self.message or check.message))
            for check in self.type.intrinsic_checks()
            if not check.predicate(value)
        ]
        issues.extend(
            ValidationIssue(self.name, self._text(check.message))
            for check in self.checks
            if not check.predicate(value)
        )
        return not issues, value, issues


class Schema:
    """An ordered, declarative description of an object payload.

    Keys not declared in the schema are dropped from the parsed output.
    """

    def __init__(self, *fields: Field) -> None:
        names = [f.name for f in fields]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate field names in schema: {names}")
        self.fields = fields

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def parse(self, data: Any, coerce: bool = False) -> dict[str, Any]:
        """Validate ``data`` and return its normalized copy.

        Args:
            data: The raw request section.
            coerce: Read numbers and booleans out of strings, for sections
                that only carry text (query, headers, path params).

        Raises:
            SchemaViolation: With one issue per failed constraint.
        """
        if not isinstance(data, Mapping):
            received = "null" if data is None else type(data).__name__
            raise SchemaViolation(
                [ValidationIssue("", f"Expected object, received {received}")]
            )

        output: dict[str, Any] = {}
        issues: list[ValidationIssue] = []
        for f in self.fields:
            present, value, field_issues = f.evaluate(data, coerce)
            issues.extend(field_issues)
            if present:
                output[f.name] = value
        if issues:
            raise SchemaViolation(issues)
        return output


class PydanticSchema:
    """Adapts a pydantic model to the ``parse`` interface of Schema.

    The parsed output is the model instance. Pydantic errors become issues
    in the order pydantic reports them, which follows field declaration.
    """

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    @property
    def field_names(self) -> list[str]:
        return list(self.model.model_fields)

    def parse(self, data: Any, coerce: bool = False) -> BaseModel:
        if isinstance(data, self.model):
            return data
        try:
            return self.model.model_validate(data)
        except PydanticValidationError as exc:
            raise SchemaViolation(
                [
                    ValidationIssue(
                        ".".join(str(part) for part in err["loc"]),
                        pydantic_issue_message(err),
                    )
                    for err in exc.errors()
                ]
            ) from exc


def pydantic_issue_message(err: Mapping[str, Any]) -> str:
    loc = ".".join(str(part) for part in err["loc"])
    message = err["msg"]
    if err["type"] == "value_error":
        return message.removeprefix("Value error, ")
    return f"{loc}: {message}" if loc else message


def as_schema(schema):
    """Return ``schema`` as an object with a ``parse`` method."""
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return PydanticSchema(schema)
    if not hasattr(schema, "parse"):
        raise TypeError(f"not a schema: {schema!r}")
    return schema
