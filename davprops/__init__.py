#!/usr/bin/env python
import logging

__version__ = "0.1.0"

from .event import DAVEvent
from .event import DAVEventListener
from .parser import PropertyDecoder
from .parser import addressbook_parser
from .parser import calendar_parser
from .parser import collection_parser
from .parser import default_parser
from .parser import publishable_parser
from .parser import shareable_parser
from .protocol import INVALID
from .protocol import decode_multistatus
from .protocol import parse_multistatus_properties

# Silence notification of no default logging handler
log = logging.getLogger("davprops")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "DAVEvent",
    "DAVEventListener",
    "INVALID",
    "PropertyDecoder",
    "addressbook_parser",
    "calendar_parser",
    "collection_parser",
    "decode_multistatus",
    "default_parser",
    "parse_multistatus_properties",
    "publishable_parser",
    "shareable_parser",
]
