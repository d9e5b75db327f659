from typing import Dict
from typing import List

from fncoerce.codecs.base import Codec
from fncoerce.codecs.form_codec import FormCodec
from fncoerce.codecs.json_codec import JSONCodec
from fncoerce.codecs.plain_codec import PlainCodec
from fncoerce.codecs.xml_codec import XMLCodec
from fncoerce.codecs.yaml_codec import YAMLCodec
from fncoerce.content_types import ContentType


class CodecRegistry:
    """
    A registry of codec paths, keyed by logical content type.
    """

    def __init__(self) -> None:
        self._map: Dict[ContentType, Codec] = {}

    def supported_types(self) -> List[ContentType]:
        return list(self._map)

    def is_registered(self, content_type: ContentType) -> bool:
        return content_type in self._map

    def register(self, content_type: ContentType, codec: Codec) -> None:
        self._map[content_type] = codec

    def get(self, content_type: ContentType) -> Codec:
        return self._map[content_type]

    def reset(self) -> None:
        """Restore the built-in codec for every logical type."""
        self._map.clear()
        self._map.update(default_codecs())


def default_codecs() -> Dict[ContentType, Codec]:
    return {
        ContentType.JSON: JSONCodec(),
        ContentType.YAML: YAMLCodec(),
        ContentType.XML: XMLCodec(),
        ContentType.PLAIN: PlainCodec(),
        ContentType.URLENCODED: FormCodec(),
    }


registry = CodecRegistry()
registry.reset()
