from ulticode_core.models.validation_report import ValidationResult
from ulticode_core.validation.formatting import format_issues


class EntityNotFoundError(KeyError):
    def __init__(self, entity: str):
        super().__init__(entity)
        self.entity = entity

    def __str__(self) -> str:
        return f"Entity '{self.entity}' not found in mock database"


class MockDataInvalidError(ValueError):
    """Raised when validation finds errors and the loader is configured to throw."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(f"Mock data validation failed:\n{format_issues(result.errors)}")
