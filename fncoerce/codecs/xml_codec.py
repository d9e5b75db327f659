import dataclasses
import types
from typing import Annotated
from typing import Any
from typing import Dict
from typing import Optional
from typing import Union
from typing import get_args
from typing import get_origin
from typing import get_type_hints
from xml.parsers.expat import ExpatError

import xmltodict
from pydantic import BaseModel

from fncoerce.codecs.base import CODEC_ERRORS
from fncoerce.codecs.base import Codec
from fncoerce.codecs.base import bytes_to_text
from fncoerce.codecs.base import from_document
from fncoerce.codecs.base import text_to_bytes
from fncoerce.codecs.base import to_document
from fncoerce.errors import CoercionError

DEFAULT_ROOT = "root"

_SEQUENCES = (list, tuple, set, frozenset)
_UNIONS = (Union, types.UnionType)


def root_name(value: Any, source: Optional[Any] = None) -> str:
    """
    Element name wrapping an encoded value: the class name for models and
    dataclasses, `root` for everything else.
    """
    tp = type(value) if source is None else source
    if isinstance(tp, type) and (
        issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp)
    ):
        return tp.__name__
    return DEFAULT_ROOT


def _strip_optional(tp: Any) -> Any:
    if get_origin(tp) in _UNIONS:
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _is_sequence(tp: Any) -> bool:
    tp = _strip_optional(tp)
    return tp in _SEQUENCES or get_origin(tp) in _SEQUENCES


def _field_types(tp: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(tp, type):
        return None
    if issubclass(tp, BaseModel):
        return {name: f.annotation for name, f in tp.model_fields.items()}
    if dataclasses.is_dataclass(tp):
        return get_type_hints(tp)
    return None


def shape(content: Any, tp: Any) -> Any:
    """
    Reshape an xmltodict document along the target type. XML can't tell
    a single element from a one-item list, or an empty element from an
    empty string, and an empty list leaves no element at all.
    """
    origin = get_origin(tp)
    if origin is Annotated:
        return shape(content, get_args(tp)[0])
    if origin in _UNIONS:
        if content is None and type(None) in get_args(tp):
            return None
        stripped = _strip_optional(tp)
        return content if stripped is tp else shape(content, stripped)
    if tp is str:
        return "" if content is None else content
    if _is_sequence(tp):
        if content is None:
            return []
        items = content if isinstance(content, list) else [content]
        args = get_args(tp)
        item_tp = args[0] if args else Any
        return [shape(item, item_tp) for item in items]
    if origin is dict:
        args = get_args(tp)
        if content is None:
            return {}
        if isinstance(content, dict) and len(args) == 2:
            return {k: shape(v, args[1]) for k, v in content.items()}
        return content

    fields = _field_types(tp)
    if fields is None:
        return content
    if content is None:
        content = {}
    if not isinstance(content, dict):
        return content
    shaped = dict(content)
    for name, hint in fields.items():
        if name in shaped:
            shaped[name] = shape(shaped[name], hint)
        elif _is_sequence(hint):
            shaped[name] = []
    return shaped


class XMLCodec(Codec):
    """
    XML <-> bytes via xmltodict.

    The document element is only a wrapper: decoding validates its content
    against the target and ignores its name. Element text arrives as
    strings and relies on pydantic's lax coercion ("42" -> 42). Lists and
    empty strings are recovered from the target type, see `shape`.
    """

    def decode(self, data: bytes, target: Any) -> Any:
        try:
            document = xmltodict.parse(bytes_to_text(data))
            (content,) = document.values()
            return from_document(shape(content, target), target)
        except (ExpatError, *CODEC_ERRORS) as e:
            raise CoercionError(str(e)) from e

    def encode(self, value: Any, source: Optional[Any] = None) -> bytes:
        try:
            document = {root_name(value, source): to_document(value, source)}
            text = xmltodict.unparse(document)
        except CODEC_ERRORS as e:
            raise CoercionError(str(e)) from e
        return text_to_bytes(text)
