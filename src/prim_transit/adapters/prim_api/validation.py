"""Schema validation returning every issue instead of raising."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from prim_transit.domain.errors import ValidationIssue

ModelT = TypeVar("ModelT", bound=BaseModel)

ROOT_PATH = "<root>"


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Outcome of validating a payload: a model, or the complete list of issues."""

    value: ModelT | None = None
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.issues


def _format_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) if loc else ROOT_PATH


def validate_payload(schema: type[ModelT], data: Any) -> ValidationResult[ModelT]:
    """Validate parsed JSON against a schema.

    Args:
        schema: Response model to validate against.
        data: Parsed JSON (dict, list, scalar or None).

    Returns:
        A ValidationResult holding the model, or every issue found.
    """
    try:
        value = schema.model_validate(data)
    except ValidationError as e:
        issues = [
            ValidationIssue(path=_format_path(error["loc"]), reason=error["msg"])
            for error in e.errors()
        ]
        return ValidationResult(issues=issues)
    return ValidationResult(value=value)
