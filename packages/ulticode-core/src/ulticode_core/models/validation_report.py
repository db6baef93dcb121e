from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["error", "warning"]


class ValidationError(BaseModel):
    """A single integrity finding for one entity field."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    entity: str
    field: str
    value: Any = None
    message: str
    severity: Severity


class ValidationResult(BaseModel):
    """Errors and warnings collected by one or more validation passes."""

    model_config = ConfigDict(extra="ignore")
    valid: bool
    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationError] = Field(default_factory=list)

    @classmethod
    def from_issues(
        cls,
        errors: Iterable[ValidationError] = (),
        warnings: Iterable[ValidationError] = (),
    ) -> "ValidationResult":
        errors = list(errors)
        return cls(valid=not errors, errors=errors, warnings=list(warnings))

    @classmethod
    def merge(cls, results: Iterable["ValidationResult"]) -> "ValidationResult":
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []
        for result in results:
            errors.extend(result.errors)
            warnings.extend(result.warnings)
        return cls.from_issues(errors, warnings)

    @property
    def summary(self) -> dict[str, int]:
        return {"error": len(self.errors), "warning": len(self.warnings)}
