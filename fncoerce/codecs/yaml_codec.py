import io
from typing import Any
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fncoerce.codecs.base import CODEC_ERRORS
from fncoerce.codecs.base import Codec
from fncoerce.codecs.base import from_document
from fncoerce.codecs.base import to_document
from fncoerce.errors import CoercionError


def _new_yaml() -> YAML:
    # ruamel's YAML object is stateful; a fresh one per call keeps
    # concurrent invocations independent
    y = YAML(typ="safe", pure=True)
    y.default_flow_style = False
    return y


class YAMLCodec(Codec):
    """
    YAML <-> bytes, safe loader/dumper. Reads and writes the raw buffer.
    """

    def decode(self, data: bytes, target: Any) -> Any:
        try:
            document = _new_yaml().load(io.BytesIO(data))
            return from_document(document, target)
        except (YAMLError, *CODEC_ERRORS) as e:
            raise CoercionError(str(e)) from e

    def encode(self, value: Any, source: Optional[Any] = None) -> bytes:
        buf = io.StringIO()
        try:
            _new_yaml().dump(to_document(value, source), buf)
        except (YAMLError, *CODEC_ERRORS) as e:
            raise CoercionError(str(e)) from e
        return buf.getvalue().encode("utf-8")
