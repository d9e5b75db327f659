from functools import lru_cache
from typing import Any
from typing import Optional
from typing import Protocol
from typing import runtime_checkable

from pydantic import TypeAdapter


@runtime_checkable
class Decodable(Protocol):
    """
    Codec capability: bytes -> value of the requested target type.
    """

    def decode(self, data: bytes, target: Any) -> Any:
        """
        Convert `data` into an instance of `target`.
        Raises CoercionError with the codec's message on failure.
        """
        ...


@runtime_checkable
class Encodable(Protocol):
    """
    Codec capability: value -> bytes.
    """

    def encode(self, value: Any, source: Optional[Any] = None) -> bytes:
        """
        Convert `value` into bytes. `source` overrides the type used to
        dump the value (defaults to runtime inference).
        Raises CoercionError with the codec's message on failure.
        """
        ...


@runtime_checkable
class Codec(Decodable, Encodable, Protocol):
    """A codec path implements both directions."""


def bytes_to_text(data: bytes) -> str:
    # One byte, one character: correct for ASCII, wrong for multi-byte
    # encodings such as UTF-8 ("é" arrives as "Ã©").
    return data.decode("latin-1")


def text_to_bytes(text: str) -> bytes:
    # Inverse of bytes_to_text. Characters above U+00FF keep only their
    # low byte.
    return bytes(ord(ch) & 0xFF for ch in text)


@lru_cache(maxsize=256)
def _cached_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def adapter_for(tp: Any) -> TypeAdapter:
    try:
        return _cached_adapter(tp)
    except TypeError:
        # unhashable type expressions can't be cached
        return TypeAdapter(tp)


def to_document(value: Any, source: Optional[Any] = None) -> Any:
    """
    Dump a typed value into plain dicts, lists and scalars.
    """
    tp = Any if source is None else source
    return adapter_for(tp).dump_python(value, mode="json")


def from_document(document: Any, target: Any) -> Any:
    """
    Validate a plain document into an instance of `target`.
    """
    return adapter_for(target).validate_python(document)


# What every codec path turns into CoercionError: pydantic's validation and
# serialization errors, json/unicode decode errors and unsupported values.
CODEC_ERRORS = (TypeError, ValueError)
