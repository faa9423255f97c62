"""Storage layer: typed records over an S3-compatible bucket."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from proto_store.storage.codecs import ProtoDeserializeOptions, ProtoSerializeOptions
from proto_store.storage.connection import ConnectionConfig, parse_connection_url
from proto_store.storage.content_types import (
    CONTENT_TYPE_CSV,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_PROTOBUF,
    EXTENSIONS,
    normalize_path,
)
from proto_store.storage.models import ObjectInfo, ReadOptions, UploadInfo, WriteOptions


@runtime_checkable
class ObjectStorage(Protocol):
    def read_data(self, path: str, read_options: ReadOptions | None = None) -> bytes:
        ...

    def write_data(self, path: str, data: bytes, write_options: WriteOptions | None = None) -> UploadInfo:
        ...


from proto_store.storage.s3 import S3Store  # noqa: E402

__all__ = [
    "ObjectStorage",
    "S3Store",
    "ConnectionConfig",
    "parse_connection_url",
    "CONTENT_TYPE_CSV",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_PROTOBUF",
    "EXTENSIONS",
    "normalize_path",
    "ObjectInfo",
    "ReadOptions",
    "UploadInfo",
    "WriteOptions",
    "ProtoSerializeOptions",
    "ProtoDeserializeOptions",
]
