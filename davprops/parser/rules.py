"""
Decoding rules shared by the property decoders.

Each rule takes one raw property value (text, a list of element
handles, or None) and returns the decoded value.  Rules never raise:
input they can't make sense of degrades to ``INVALID`` or ``None``.
"""

import re
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Any
from typing import List
from typing import Optional

from dateutil import parser as dateparser

from davprops.lib.namespace import ns
from davprops.protocol.types import CalendarComponents
from davprops.protocol.types import DataType
from davprops.protocol.types import INVALID
from davprops.protocol.types import RawValue
from davprops.protocol.types import text_content

utc_tz = timezone.utc

HREF = ns("D", "href")

_leading_int = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def text(value: RawValue) -> RawValue:
    return value


def string_value(value: RawValue) -> str:
    """
    The text content of the property element, whatever shape the raw
    value has: text as-is, the children's text joined, "" for None.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "".join(text_content(v) for v in value)
    return ""


def decimal_int(value: RawValue) -> Any:
    """
    Leading base-10 integer of the text: "42" and "42px" both give 42.

    Text without leading digits gives INVALID.
    """
    if not isinstance(value, str):
        return INVALID
    m = _leading_int.match(value)
    if m is None:
        return INVALID
    return int(m.group(1))


def boolean(value: RawValue) -> bool:
    return value == "1"


def nothing(value: RawValue) -> None:
    return None


def color(value: RawValue) -> RawValue:
    ## Some clients (Apple Calendar) store an alpha channel as #RRGGBBAA,
    ## which not every consumer can parse.  Cut it down to #RRGGBB.
    if isinstance(value, str) and len(value) == 9:
        return value[:7]
    return value


def ical_timestamp(value: RawValue) -> Any:
    """
    Read an iCalendar UTC date-time like "20491231T235959Z".

    The fields are picked by position only, the zone suffix is not
    looked at and the result is always UTC.  Fields out of range roll
    over into the next larger unit (month 13 is January of the next
    year, second 60 is the next minute), as with the JavaScript Date
    setters.  Returns INVALID if a field isn't numeric or the result
    can't be represented.
    """
    if not isinstance(value, str):
        return INVALID

    year = decimal_int(value[0:4])
    month = decimal_int(value[4:6])
    day = decimal_int(value[6:8])
    hour = decimal_int(value[9:11])
    minute = decimal_int(value[11:13])
    second = decimal_int(value[13:15])

    fields = (year, month, day, hour, minute, second)
    if any(f is INVALID for f in fields):
        return INVALID

    year, month = divmod(year * 12 + month - 1, 12)
    try:
        return datetime(year, month + 1, 1, tzinfo=utc_tz) + timedelta(
            days=day - 1, hours=hour, minutes=minute, seconds=second
        )
    except (ValueError, OverflowError):
        return INVALID


def http_date(value: RawValue) -> Any:
    """
    Read an HTTP date like "Mon, 12 Jan 1998 09:25:56 GMT" (as in
    DAV:getlastmodified) into a UTC datetime.  A date without zone is
    taken to be UTC.  Unparseable dates give INVALID.
    """
    try:
        ts = dateparser.parse(string_value(value))
    except (ValueError, OverflowError):
        return INVALID
    if ts.tzinfo is None:
        return ts.replace(tzinfo=utc_tz)
    return ts.astimezone(utc_tz)


def calendar_components(value: RawValue) -> CalendarComponents:
    """
    Flags for the component types listed in a
    supported-calendar-component-set.  Names are compared
    case-insensitively, unknown ones are ignored.
    """
    components: CalendarComponents = {
        "vevent": False,
        "vjournal": False,
        "vtodo": False,
    }
    if not isinstance(value, list):
        return components

    for comp in value:
        name = comp.get("name")
        if not isinstance(name, str):
            continue
        name = name.lower()
        if name in components:
            components[name] = True

    return components


def data_types(value: RawValue) -> Optional[List[DataType]]:
    """content-type and version attributes of each element, in order."""
    if not isinstance(value, list):
        return None

    return [
        {"content-type": v.get("content-type"), "version": v.get("version")}
        for v in value
    ]


def texts(value: RawValue) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None

    return [text_content(v) for v in value]


## The rules below need the element tag as well, so they work on lxml
## elements rather than on any ElementHandle.


def element_key(elem: Any) -> str:
    """The "{namespace}local-name" key of an lxml element."""
    tag = elem.tag
    if tag.startswith("{"):
        return tag
    return "{}%s" % tag


def children_named(value: RawValue, *tags: str) -> list:
    """The elements of a raw value with one of the given tags."""
    if not isinstance(value, list):
        return []
    return [v for v in value if v.tag in tags]


def href(value: RawValue) -> str:
    """Text of the first DAV:href, "" if there is none."""
    hrefs = children_named(value, HREF)
    if not hrefs:
        return ""
    return text_content(hrefs[0])


def hrefs(value: RawValue) -> List[str]:
    return [text_content(v) for v in children_named(value, HREF)]


def child_keys(value: RawValue) -> List[str]:
    """Keys of the elements of a raw value, e.g. for DAV:resourcetype."""
    if not isinstance(value, list):
        return []
    return [element_key(v) for v in value]
