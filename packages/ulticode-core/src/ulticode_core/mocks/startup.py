from ulticode_core.codebase.log import get_logger
from ulticode_core.mocks.config import is_development
from ulticode_core.mocks.errors import MockDataInvalidError
from ulticode_core.mocks.loader import MockDataLoader, default_loader
from ulticode_core.models.validation_report import ValidationResult

_logger = get_logger("startup")


def validate_on_startup(
    loader: MockDataLoader | None = None, *, enabled: bool | None = None
) -> ValidationResult | None:
    """Validate the mock database once and log the findings without halting.

    Runs only in development unless `enabled` says otherwise. Returns the
    result, or None when skipped.
    """
    if enabled is None:
        enabled = is_development()
    if not enabled:
        return None

    if loader is None:
        loader = default_loader

    _logger.info("Validating mock data...")
    try:
        result = loader.validate()
    except MockDataInvalidError as e:
        result = e.result

    if not result.valid:
        _logger.error("Mock data validation failed:")
        for error in result.errors:
            _logger.error("  [ERROR] %s.%s: %s", error.entity, error.field, error.message)
    elif result.warnings:
        _logger.warning("Mock data validation warnings:")
        for warning in result.warnings:
            _logger.warning("  [WARNING] %s.%s: %s", warning.entity, warning.field, warning.message)
    else:
        _logger.info("Mock data validation passed")

    return result
