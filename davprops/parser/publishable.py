"""Decoding of CalendarServer publishing properties."""

from typing import Optional

from davprops.lib.namespace import ns
from davprops.protocol.types import RawValue
from davprops.protocol.types import text_content

from .base import PropertyDecoder


def publish_url(value: RawValue) -> Optional[str]:
    if not isinstance(value, list) or not value:
        return None
    return text_content(value[0])


publishable_decoder = PropertyDecoder(
    [
        (ns("CS", "publish-url"), publish_url),
    ]
)


def publishable_parser(props):
    return publishable_decoder.decode(props)
