from typing import Any
from typing import Optional

from fncoerce.codecs.base import CODEC_ERRORS
from fncoerce.codecs.base import Codec
from fncoerce.codecs.base import bytes_to_text
from fncoerce.codecs.base import from_document
from fncoerce.codecs.base import text_to_bytes
from fncoerce.codecs.base import to_document
from fncoerce.errors import CoercionError


def scalar_to_text(document: Any) -> str:
    if document is None:
        return ""
    if isinstance(document, bool):
        return "true" if document else "false"
    if isinstance(document, (str, int, float)):
        return str(document)
    raise CoercionError(
        f"plain text supports only scalar values, got {type(document).__name__}"
    )


class PlainCodec(Codec):
    """
    text/plain <-> scalars. The whole body is one value: a string as-is, or
    a number/boolean parsed from its text. Empty input is the empty string.
    """

    def decode(self, data: bytes, target: Any) -> Any:
        try:
            return from_document(bytes_to_text(data), target)
        except CODEC_ERRORS as e:
            raise CoercionError(str(e)) from e

    def encode(self, value: Any, source: Optional[Any] = None) -> bytes:
        try:
            document = to_document(value, source)
        except CODEC_ERRORS as e:
            raise CoercionError(str(e)) from e
        return text_to_bytes(scalar_to_text(document))
