"""Content types understood by the store and their canonical file extensions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_CSV = "text/csv"
CONTENT_TYPE_PROTOBUF = "application/x-protobuf"

EXTENSIONS: Mapping[str, str] = MappingProxyType(
    {
        CONTENT_TYPE_JSON: "json",
        CONTENT_TYPE_CSV: "csv",
        CONTENT_TYPE_PROTOBUF: "pb",
    }
)


def extension_of(path: str) -> str:
    """Return the extension of the last path segment, without the dot."""
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot + 1 :]


def normalize_path(path: str, content_type: str) -> str:
    """Make ``path`` end with the canonical extension for ``content_type``.

    A differing extension is kept and the canonical one is appended after it,
    so ``notes.txt`` stored as JSON becomes ``notes.txt.json``. Unknown content
    types leave the path untouched.
    """
    canonical = EXTENSIONS.get(content_type)
    if canonical is None or extension_of(path) == canonical:
        return path
    return f"{path}.{canonical}"


__all__ = [
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_CSV",
    "CONTENT_TYPE_PROTOBUF",
    "EXTENSIONS",
    "extension_of",
    "normalize_path",
]
