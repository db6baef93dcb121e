from .schema import ForeignKey, PrimaryKey, Reference, SchemaMetadata
from .validation_report import Severity, ValidationError, ValidationResult

__all__ = [
    "ForeignKey",
    "PrimaryKey",
    "Reference",
    "SchemaMetadata",
    "Severity",
    "ValidationError",
    "ValidationResult",
]
