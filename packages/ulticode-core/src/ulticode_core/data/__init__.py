from .loader import (
    Database,
    Record,
    load_yaml_typed,
    read_database_dir,
    read_database_file,
    table_entries,
)

__all__ = [
    "Database",
    "Record",
    "load_yaml_typed",
    "read_database_dir",
    "read_database_file",
    "table_entries",
]
