"""Spec serializer.

Encodes SignalSpec trees as JSON or msgpack bytes, for storing presets or
shipping a tree to another process.
"""

from __future__ import annotations

import json
from typing import Any, Literal, cast

import msgpack

from ..config import get_settings
from ..core.errors import SpecDecodeError
from .loader import dump_spec, load_spec
from .models import SignalSpec

# Serialization format type
SerializationFormat = Literal["json", "msgpack"]


class SpecSerializer:
    """Spec tree serializer.

    Supports JSON (human readable) and msgpack (compact) formats.

    Usage:
        serializer = SpecSerializer(format="msgpack")
        payload = serializer.serialize(spec)
        same_spec = serializer.deserialize(payload)
    """

    def __init__(self, format: SerializationFormat | None = None):
        """Initialize serializer.

        Args:
            format: Serialization format ("json" or "msgpack"). Defaults to
                the serialization_format setting.
        """
        if format is None:
            format = get_settings().serialization_format
        if format not in ("json", "msgpack"):
            raise ValueError(f"Unsupported serialization format: {format!r}")
        self._format = format

    @property
    def format(self) -> SerializationFormat:
        """Get current serialization format."""
        return self._format

    def serialize(self, spec: SignalSpec) -> bytes:
        """Serialize a spec tree to bytes."""
        data = dump_spec(spec)
        if self._format == "json":
            return json.dumps(data).encode("utf-8")
        return cast(bytes, msgpack.packb(data, use_bin_type=True))

    def deserialize(self, payload: bytes) -> SignalSpec:
        """Deserialize bytes to a validated spec tree.

        Raises:
            SpecDecodeError: If the payload is not a valid encoding
        """
        try:
            if self._format == "json":
                data: Any = json.loads(payload.decode("utf-8"))
            else:
                data = msgpack.unpackb(payload, raw=False)
        except (UnicodeDecodeError, json.JSONDecodeError, msgpack.UnpackException, ValueError) as e:
            raise SpecDecodeError(f"Cannot decode {self._format} payload: {e}") from e
        return load_spec(data)
