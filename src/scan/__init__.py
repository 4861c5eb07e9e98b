"""Source tree scanning for abapGit repositories."""

from scan.files import DEFAULT_EXTENSIONS, find_source_files
from scan.index import IndexCollision, SourceIndex, build_source_index

__all__ = [
    "DEFAULT_EXTENSIONS",
    "IndexCollision",
    "SourceIndex",
    "build_source_index",
    "find_source_files",
]
