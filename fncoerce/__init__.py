from .codecs.base import Codec
from .codecs.base import Decodable
from .codecs.base import Encodable
from .codecs.registry import registry
from .coercion import decode
from .coercion import decode_mime
from .coercion import encode
from .coercion import encode_response
from .config import FunctionConfig
from .content_types import ContentType
from .content_types import canonical_mime
from .content_types import classify
from .errors import CoercionError
from .errors import FunctionError
from .errors import UnsupportedContentTypeError
from .function import Function
from .interfaces import InvocationResult
from .interfaces import RuntimeContext
from .middleware import logging_middleware
from .middleware import metrics_middleware

__version__ = "0.1.0"

__all__ = [
    "ContentType",
    "classify",
    "canonical_mime",
    "decode",
    "encode",
    "decode_mime",
    "encode_response",
    "Codec",
    "Decodable",
    "Encodable",
    "registry",
    "CoercionError",
    "UnsupportedContentTypeError",
    "FunctionError",
    "FunctionConfig",
    "Function",
    "RuntimeContext",
    "InvocationResult",
    "logging_middleware",
    "metrics_middleware",
]
