"""
Typed decoding of WebDAV properties.

Every decoder takes the raw property mapping of one resource, as produced
by :func:`davprops.protocol.parse_multistatus_properties`, and returns
the properties it knows about with typed values.  Unknown properties
are dropped.
"""

from .addressbook import addressbook_decoder
from .addressbook import addressbook_parser
from .base import PropertyDecoder
from .calendar import calendar_decoder
from .calendar import calendar_parser
from .collection import collection_decoder
from .collection import collection_parser
from .default import default_decoder
from .default import default_parser
from .publishable import publishable_decoder
from .publishable import publishable_parser
from .shareable import shareable_decoder
from .shareable import shareable_parser

__all__ = [
    "PropertyDecoder",
    "addressbook_decoder",
    "addressbook_parser",
    "calendar_decoder",
    "calendar_parser",
    "collection_decoder",
    "collection_parser",
    "default_decoder",
    "default_parser",
    "publishable_decoder",
    "publishable_parser",
    "shareable_decoder",
    "shareable_parser",
]
