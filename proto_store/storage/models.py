from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from urllib.parse import urlencode


@dataclass(frozen=True)
class ReadOptions:
    version_id: str | None = None
    # HTTP range header, e.g. "bytes=0-1023"
    range: str | None = None
    if_match: str | None = None
    if_none_match: str | None = None

    def to_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.version_id:
            kwargs["VersionId"] = self.version_id
        if self.range:
            kwargs["Range"] = self.range
        if self.if_match:
            kwargs["IfMatch"] = self.if_match
        if self.if_none_match:
            kwargs["IfNoneMatch"] = self.if_none_match
        return kwargs


@dataclass(frozen=True)
class WriteOptions:
    content_type: str | None = None
    content_encoding: str | None = None
    content_disposition: str | None = None
    cache_control: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    storage_class: str | None = None
    acl: str | None = None
    tags: dict[str, str] = field(default_factory=dict)

    def to_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.content_type:
            kwargs["ContentType"] = self.content_type
        if self.content_encoding:
            kwargs["ContentEncoding"] = self.content_encoding
        if self.content_disposition:
            kwargs["ContentDisposition"] = self.content_disposition
        if self.cache_control:
            kwargs["CacheControl"] = self.cache_control
        if self.metadata:
            kwargs["Metadata"] = dict(self.metadata)
        if self.storage_class:
            kwargs["StorageClass"] = self.storage_class
        if self.acl:
            kwargs["ACL"] = self.acl
        if self.tags:
            kwargs["Tagging"] = urlencode(self.tags)
        return kwargs


@dataclass(frozen=True)
class ObjectInfo:
    key: str
    size: int
    etag: str = ""
    content_type: str | None = None
    last_modified: datetime | None = None
    version_id: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_head(cls, key: str, response: dict[str, Any]) -> "ObjectInfo":
        return cls(
            key=key,
            size=int(response.get("ContentLength", 0)),
            etag=str(response.get("ETag", "")).strip('"'),
            content_type=response.get("ContentType"),
            last_modified=response.get("LastModified"),
            version_id=response.get("VersionId"),
            metadata=dict(response.get("Metadata") or {}),
        )


@dataclass(frozen=True)
class UploadInfo:
    bucket: str
    key: str
    size: int
    etag: str = ""
    version_id: str | None = None

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


__all__ = ["ReadOptions", "WriteOptions", "ObjectInfo", "UploadInfo"]
