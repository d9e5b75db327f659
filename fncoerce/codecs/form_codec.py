from typing import Any
from typing import Dict
from typing import Optional
from urllib.parse import parse_qsl
from urllib.parse import urlencode

from fncoerce.codecs.base import CODEC_ERRORS
from fncoerce.codecs.base import Codec
from fncoerce.codecs.base import bytes_to_text
from fncoerce.codecs.base import from_document
from fncoerce.codecs.base import text_to_bytes
from fncoerce.codecs.base import to_document
from fncoerce.codecs.plain_codec import scalar_to_text
from fncoerce.errors import CoercionError


def _flatten(document: Any) -> Dict[str, str]:
    if not isinstance(document, dict):
        raise CoercionError(
            "form encoding supports only flat mappings, "
            f"got {type(document).__name__}"
        )
    pairs: Dict[str, str] = {}
    for key, value in document.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            raise CoercionError(
                f"form encoding supports only scalar values, key {key!r} "
                f"holds {type(value).__name__}"
            )
        pairs[str(key)] = scalar_to_text(value)
    return pairs


class FormCodec(Codec):
    """
    application/x-www-form-urlencoded <-> flat mappings. A repeated key
    keeps its last value; `None` fields are left out when encoding.
    """

    def decode(self, data: bytes, target: Any) -> Any:
        try:
            pairs = parse_qsl(bytes_to_text(data), keep_blank_values=True)
            return from_document(dict(pairs), target)
        except CODEC_ERRORS as e:
            raise CoercionError(str(e)) from e

    def encode(self, value: Any, source: Optional[Any] = None) -> bytes:
        try:
            document = to_document(value, source)
        except CODEC_ERRORS as e:
            raise CoercionError(str(e)) from e
        return text_to_bytes(urlencode(_flatten(document)))
