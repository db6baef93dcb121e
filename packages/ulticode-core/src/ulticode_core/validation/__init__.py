from .formatting import format_issue, format_issues
from .mock_data import (
    PASSES,
    run_passes,
    validate,
    validate_composite_keys,
    validate_enums,
    validate_foreign_keys,
    validate_json_fields,
    validate_one_to_one_relationships,
    validate_primary_keys,
    validate_required_fields,
    validate_sequential_ordering,
    validate_temporal_ordering,
)

__all__ = [
    "PASSES",
    "format_issue",
    "format_issues",
    "run_passes",
    "validate",
    "validate_composite_keys",
    "validate_enums",
    "validate_foreign_keys",
    "validate_json_fields",
    "validate_one_to_one_relationships",
    "validate_primary_keys",
    "validate_required_fields",
    "validate_sequential_ordering",
    "validate_temporal_ordering",
]
