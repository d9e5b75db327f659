from .base import Codec
from .base import Decodable
from .base import Encodable
from .form_codec import FormCodec
from .json_codec import JSONCodec
from .plain_codec import PlainCodec
from .registry import CodecRegistry
from .registry import registry
from .xml_codec import XMLCodec
from .yaml_codec import YAMLCodec

__all__ = [
    "Codec",
    "Decodable",
    "Encodable",
    "CodecRegistry",
    "registry",
    "JSONCodec",
    "YAMLCodec",
    "XMLCodec",
    "PlainCodec",
    "FormCodec",
]
