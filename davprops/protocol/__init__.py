"""
Sans-I/O response handling.

This package turns WebDAV response bodies into raw property mappings,
without doing any I/O:

- types: ElementHandle protocol, RawValue, the INVALID marker and record types
- xml_parsers: pure functions to pull properties out of multistatus XML

Example usage:

    from davprops.protocol import decode_multistatus
    from davprops.parser import calendar_parser

    body = your_http_client.propfind(url, depth=1).content
    calendars = decode_multistatus(body, calendar_parser)
"""

from .types import (
    INVALID,
    CalendarComponents,
    DataType,
    ElementHandle,
    PropstatResult,
    RawValue,
    text_content,
)
from .xml_parsers import (
    decode_multistatus,
    parse_multistatus,
    parse_multistatus_properties,
    parse_prop,
    parse_prop_node,
)

__all__ = [
    # Types
    "INVALID",
    "CalendarComponents",
    "DataType",
    "ElementHandle",
    "PropstatResult",
    "RawValue",
    "text_content",
    # XML Parsers
    "decode_multistatus",
    "parse_multistatus",
    "parse_multistatus_properties",
    "parse_prop",
    "parse_prop_node",
]
