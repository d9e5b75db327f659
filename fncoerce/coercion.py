from typing import Any
from typing import Optional
from typing import Tuple
from typing import Type
from typing import TypeVar

from fncoerce.codecs.registry import registry
from fncoerce.content_types import ContentType
from fncoerce.content_types import canonical_mime
from fncoerce.content_types import classify
from fncoerce.errors import CoercionError
from fncoerce.log_config import logger

T = TypeVar("T")


def decode(content_type: ContentType, data: bytes, target: Type[T]) -> T:
    """
    Convert `data` into an instance of `target` using the codec path for
    `content_type`. Raises CoercionError carrying the codec's message.
    """
    codec = registry.get(content_type)
    logger.debug(
        "Decoding %d bytes as %s into %s",
        len(data),
        content_type.name,
        getattr(target, "__name__", repr(target)),
    )
    try:
        return codec.decode(bytes(data), target)
    except CoercionError as e:
        logger.info("Decode as %s failed: %s", content_type.name, e.message)
        raise


def encode(
    content_type: ContentType, value: Any, source: Optional[Any] = None
) -> bytes:
    """
    Convert `value` into bytes using the codec path for `content_type`.
    Raises CoercionError carrying the codec's message.
    """
    codec = registry.get(content_type)
    try:
        data = codec.encode(value, source)
    except CoercionError as e:
        logger.info("Encode as %s failed: %s", content_type.name, e.message)
        raise
    logger.debug("Encoded %d bytes as %s", len(data), content_type.name)
    return data


def decode_mime(mime: str, data: bytes, target: Type[T]) -> T:
    """Classify a declared MIME string, then decode."""
    return decode(classify(mime), data, target)


def encode_response(
    content_type: ContentType, value: Any, source: Optional[Any] = None
) -> Tuple[bytes, str]:
    """Encode a result and pair it with the canonical response MIME."""
    return encode(content_type, value, source), canonical_mime(content_type)
