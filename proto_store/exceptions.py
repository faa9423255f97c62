"""Custom exception hierarchy for proto-store."""

from __future__ import annotations

from typing import Any


class ProtoStoreError(Exception):
    """Base exception for all proto-store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ProtoStoreError):
    """Base class for configuration errors."""
    pass


class InvalidConnectionURLError(ConfigurationError):
    """Raised when a connection descriptor cannot be parsed."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when the endpoint address or credentials are missing."""
    pass


class StorageError(ProtoStoreError):
    """Base class for object storage failures."""
    pass


class AuthenticationError(StorageError):
    """Raised when the storage client cannot be configured."""
    pass


class BucketInitializationError(StorageError):
    """Raised when the bucket can be neither created nor found."""
    pass


class FetchError(StorageError):
    """Raised when an object stream cannot be opened."""
    pass


class ReadError(StorageError):
    """Raised when an object cannot be read."""
    pass


class UploadError(StorageError):
    """Raised when an object upload fails."""
    pass


class CodecError(ProtoStoreError):
    """Base class for payload encoding errors."""
    pass


class SerializationError(CodecError):
    """Raised when a payload cannot be serialized."""
    pass


class DeserializationError(CodecError):
    """Raised when a payload cannot be deserialized."""
    pass
