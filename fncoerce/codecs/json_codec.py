import json
from typing import Any
from typing import Optional

from fncoerce.codecs.base import CODEC_ERRORS
from fncoerce.codecs.base import Codec
from fncoerce.codecs.base import from_document
from fncoerce.codecs.base import to_document
from fncoerce.errors import CoercionError


class JSONCodec(Codec):
    """
    JSON <-> bytes. Reads and writes the raw buffer (no byte mapping).
    """

    def decode(self, data: bytes, target: Any) -> Any:
        try:
            return from_document(json.loads(data), target)
        except CODEC_ERRORS as e:
            raise CoercionError(str(e)) from e

    def encode(self, value: Any, source: Optional[Any] = None) -> bytes:
        try:
            document = to_document(value, source)
            text = json.dumps(
                document, ensure_ascii=False, separators=(",", ":")
            )
        except CODEC_ERRORS as e:
            raise CoercionError(str(e)) from e
        return text.encode("utf-8")
