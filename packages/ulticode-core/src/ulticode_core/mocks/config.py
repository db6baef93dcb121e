"""
Loader configuration.

Environment flags (all optional):

    ULTICODE_MOCKS_CACHE = "0" | "1"
        Default: "1". Cache merged data, per-entity lookups and validation results.

    ULTICODE_MOCKS_VALIDATE_ON_LOAD = "0" | "1"
        Default: "0". Validate every time the merged database is (re)built.

    ULTICODE_MOCKS_THROW_ON_ERROR = "0" | "1"
        Default: "0". Raise MockDataInvalidError when validation finds errors.

    ULTICODE_MOCKS_DIR = path
        Default: unset (packaged sample dataset). Directory of YAML/JSON sources.

    ULTICODE_ENV = "development" | anything else
        Default: "development". Startup validation only runs in development.
"""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def is_development() -> bool:
    return os.getenv("ULTICODE_ENV", "development").strip().lower() == "development"


@dataclass(frozen=True)
class LoaderConfig:
    enable_caching: bool = True
    validate_on_load: bool = False
    throw_on_error: bool = False
    data_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "LoaderConfig":
        data_dir = os.getenv("ULTICODE_MOCKS_DIR")
        return cls(
            enable_caching=_env_bool("ULTICODE_MOCKS_CACHE", True),
            validate_on_load=_env_bool("ULTICODE_MOCKS_VALIDATE_ON_LOAD", False),
            throw_on_error=_env_bool("ULTICODE_MOCKS_THROW_ON_ERROR", False),
            data_dir=Path(data_dir) if data_dir else None,
        )
