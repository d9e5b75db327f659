from enum import Enum
from typing import Dict
from typing import FrozenSet

JSON_MIME = "application/json"
TEXT_MIME = "text/plain"
FORM_MIME = "application/x-www-form-urlencoded"
XML_TEXT_MIME = "text/xml"
XML_APP_MIME = "application/xml"
YAML_TEXT_MIME = "text/yaml"
YAML_APP_MIME = "application/yaml"


class ContentType(Enum):
    """
    The closed set of payload formats the coercion layer understands.
    """

    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    PLAIN = "plain"
    URLENCODED = "urlencoded"

    @classmethod
    def from_mime(cls, mime: str) -> "ContentType":
        return classify(mime)

    @property
    def header_value(self) -> str:
        return canonical_mime(self)


# outbound header value per logical type
CANONICAL_MIMES: Dict[ContentType, str] = {
    ContentType.JSON: JSON_MIME,
    ContentType.YAML: YAML_TEXT_MIME,
    ContentType.XML: XML_APP_MIME,
    ContentType.PLAIN: TEXT_MIME,
    ContentType.URLENCODED: FORM_MIME,
}

# inbound MIME strings, matched exactly (case-sensitive, no parameters)
ACCEPTED_MIMES: Dict[str, ContentType] = {
    JSON_MIME: ContentType.JSON,
    YAML_TEXT_MIME: ContentType.YAML,
    YAML_APP_MIME: ContentType.YAML,
    XML_TEXT_MIME: ContentType.XML,
    XML_APP_MIME: ContentType.XML,
    TEXT_MIME: ContentType.PLAIN,
    FORM_MIME: ContentType.URLENCODED,
}

DEFAULT_CONTENT_TYPE = ContentType.JSON


def supported_mimes() -> FrozenSet[str]:
    return frozenset(ACCEPTED_MIMES)


def is_accepted(mime: str) -> bool:
    return mime in ACCEPTED_MIMES


def classify(mime: str) -> ContentType:
    """
    Map an inbound MIME string to its logical type.
    Unrecognized strings (including "") classify as JSON; this never fails.
    """
    return ACCEPTED_MIMES.get(mime, DEFAULT_CONTENT_TYPE)


def canonical_mime(content_type: ContentType) -> str:
    """
    The single outbound MIME string used for responses of this type.
    """
    return CANONICAL_MIMES[content_type]
