"""Payload codecs for the three record kinds (protobuf, JSON, CSV)."""

from __future__ import annotations

import csv
import io
import json
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, TypeVar

from google.protobuf.message import DecodeError, EncodeError, Message
from pydantic import BaseModel, TypeAdapter, ValidationError

from proto_store.exceptions import DeserializationError, SerializationError

M = TypeVar("M", bound=Message)
T = TypeVar("T")

# Rows written by encode_csv must always be readable, whatever their field size
csv.field_size_limit(min(sys.maxsize, 2**31 - 1))


@dataclass(frozen=True)
class ProtoSerializeOptions:
    deterministic: bool = False
    # Skip the required-field check (proto2 messages)
    allow_partial: bool = False


@dataclass(frozen=True)
class ProtoDeserializeOptions:
    # Merge into the existing message contents instead of clearing them first
    merge: bool = False
    discard_unknown: bool = False


def encode_proto(message: Message, options: ProtoSerializeOptions | None = None) -> bytes:
    opts = options or ProtoSerializeOptions()
    try:
        if opts.allow_partial:
            return message.SerializePartialToString(deterministic=opts.deterministic)
        return message.SerializeToString(deterministic=opts.deterministic)
    except EncodeError as exc:
        raise SerializationError(
            f"Failed to serialize {type(message).__name__}: {exc}",
            {"codec": "protobuf"},
        ) from exc


def decode_proto(data: bytes, message: M, options: ProtoDeserializeOptions | None = None) -> M:
    opts = options or ProtoDeserializeOptions()
    try:
        if opts.merge:
            message.MergeFromString(data)
        else:
            message.ParseFromString(data)
    except DecodeError as exc:
        raise DeserializationError(
            f"Failed to deserialize {type(message).__name__}: {exc}",
            {"codec": "protobuf"},
        ) from exc
    if opts.discard_unknown:
        message.DiscardUnknownFields()
    return message


def encode_json(value: Any) -> bytes:
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to serialize JSON: {exc}", {"codec": "json"}) from exc


def decode_json(data: bytes, model: type[T] | None = None) -> T | Any:
    """Decode a JSON document, optionally validating it into ``model``.

    ``model`` may be anything pydantic can validate against: a ``BaseModel``
    subclass, a dataclass or a typing construct like ``dict[str, int]``.
    """
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise DeserializationError(f"Failed to deserialize JSON: {exc}", {"codec": "json"}) from exc
    if model is None:
        return payload
    try:
        return TypeAdapter(model).validate_python(payload)
    except ValidationError as exc:
        raise DeserializationError(
            f"JSON document does not match {getattr(model, '__name__', model)}: {exc}",
            {"codec": "json"},
        ) from exc


def encode_csv(rows: Iterable[Sequence[str]]) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    try:
        writer.writerows(rows)
    except (csv.Error, TypeError) as exc:
        raise SerializationError(f"Failed to serialize CSV: {exc}", {"codec": "csv"}) from exc
    return buffer.getvalue().encode("utf-8")


def decode_csv(data: bytes) -> list[list[str]]:
    try:
        reader = csv.reader(io.StringIO(data.decode("utf-8"), newline=""), strict=True)
        return [row for row in reader]
    except (UnicodeDecodeError, csv.Error) as exc:
        raise DeserializationError(f"Failed to deserialize CSV: {exc}", {"codec": "csv"}) from exc


__all__ = [
    "ProtoSerializeOptions",
    "ProtoDeserializeOptions",
    "encode_proto",
    "decode_proto",
    "encode_json",
    "decode_json",
    "encode_csv",
    "decode_csv",
]
