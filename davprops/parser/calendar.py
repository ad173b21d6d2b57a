"""
Decoding of calendar collection properties (RFC 4791 plus the Apple,
CalendarServer, ownCloud and Nextcloud extensions).

    >>> calendar_parser({
    ...     "{http://apple.com/ns/ical/}calendar-color": "#78e774ff",
    ...     "{DAV:}displayname": "Privat",
    ... })
    {'{http://apple.com/ns/ical/}calendar-color': '#78e774'}
"""

from davprops.lib.namespace import ns

from . import rules
from .base import PropertyDecoder

calendar_decoder = PropertyDecoder(
    [
        (ns("I", "calendar-color"), rules.color),
        (ns("CS", "getctag"), rules.text),
        (ns("NC", "owner-displayname"), rules.text),
        (ns("C", "calendar-description"), rules.text),
        (ns("C", "calendar-timezone"), rules.text),
        (ns("I", "calendar-order"), rules.decimal_int),
        (ns("C", "max-resource-size"), rules.decimal_int),
        (ns("C", "max-instances"), rules.decimal_int),
        (ns("C", "max-attendees-per-instance"), rules.decimal_int),
        ## TODO: decode cs:source into the subscription URL once the
        ## subscription model consumes it; recognized but empty until then.
        (ns("CS", "source"), rules.nothing),
        (ns("C", "supported-calendar-component-set"), rules.calendar_components),
        (ns("C", "supported-calendar-data"), rules.data_types),
        (ns("C", "min-date-time"), rules.ical_timestamp),
        (ns("C", "max-date-time"), rules.ical_timestamp),
        (ns("C", "supported-collation-set"), rules.texts),
        (ns("OC", "calendar-enabled"), rules.boolean),
    ]
)


def calendar_parser(props):
    return calendar_decoder.decode(props)
