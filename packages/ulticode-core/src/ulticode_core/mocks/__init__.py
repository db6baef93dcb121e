from .config import LoaderConfig
from .errors import EntityNotFoundError, MockDataInvalidError
from .loader import (
    MockDataLoader,
    default_loader,
    get_by_composite_key,
    get_by_primary_key,
    get_related,
    load_all,
    load_entity,
)
from .startup import validate_on_startup

__all__ = [
    "EntityNotFoundError",
    "LoaderConfig",
    "MockDataInvalidError",
    "MockDataLoader",
    "default_loader",
    "get_by_composite_key",
    "get_by_primary_key",
    "get_related",
    "load_all",
    "load_entity",
    "validate_on_startup",
]
