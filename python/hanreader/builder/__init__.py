"""Dictionary builder module.

Builds immutable lookup tables:
- Headword (and alternate headword) to entries in file order
- Build statistics for skipped and parsed lines
"""

from .dictionary import (
    BuildStats,
    DictionaryBuilder,
    DictionaryTable,
    build_table,
    load_table,
)

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
    "DictionaryTable",
    "build_table",
    "load_table",
]
