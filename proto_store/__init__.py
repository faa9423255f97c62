"""Typed protobuf, JSON and CSV records in an S3-compatible bucket."""

from proto_store.exceptions import ProtoStoreError
from proto_store.storage import S3Store

__version__ = "0.1.0"

__all__ = ["ProtoStoreError", "S3Store", "__version__"]
