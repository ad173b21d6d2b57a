"""
Decoding of the well known WebDAV, CalDAV and CardDAV properties, plus
the common server extensions.

This is the catch-all decoder for PROPFIND responses on principals,
homes and arbitrary resources.  The collection specific decoders
(:mod:`.calendar`, :mod:`.addressbook`, ...) decode some of the same
keys differently; chain them after this one to let them win::

    decoder = default_decoder.chain(calendar_decoder)
"""

from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from davprops.lib.namespace import ns
from davprops.protocol.types import RawValue
from davprops.protocol.types import text_content

from . import rules
from .base import PropertyDecoder


def text(value: RawValue) -> str:
    return rules.string_value(value)


def boolean(value: RawValue) -> bool:
    return rules.string_value(value) == "1"


def decimal_int(value: RawValue) -> Any:
    return rules.decimal_int(rules.string_value(value))


def color(value: RawValue) -> str:
    return rules.color(rules.string_value(value))


def ical_timestamp(value: RawValue) -> Any:
    return rules.ical_timestamp(rules.string_value(value))


def privileges(value: RawValue) -> List[str]:
    """Keys of the privileges in a DAV:current-user-privilege-set."""
    result = []
    for privilege in rules.children_named(value, ns("D", "privilege")):
        result.extend(rules.element_key(p) for p in privilege if isinstance(p.tag, str))
    return result


def current_user_principal(value: RawValue) -> Dict[str, Optional[str]]:
    if rules.children_named(value, ns("D", "unauthenticated")):
        return {"type": "unauthenticated", "href": None}
    return {"type": "href", "href": rules.href(value)}


def component_names(value: RawValue) -> List[str]:
    return [
        comp.get("name") or ""
        for comp in rules.children_named(value, ns("C", "comp"))
    ]


def calendar_data_types(value: RawValue) -> List[Dict[str, str]]:
    return [
        {
            "content-type": v.get("content-type") or "",
            "version": v.get("version") or "",
        }
        for v in rules.children_named(value, ns("C", "calendar-data"))
    ]


def address_data_types(value: RawValue) -> List[Dict[str, str]]:
    return [
        {
            "content-type": v.get("content-type") or "",
            "version": v.get("version") or "",
        }
        for v in rules.children_named(value, ns("CR", "address-data-type"))
    ]


def caldav_collations(value: RawValue) -> List[str]:
    return [
        text_content(v)
        for v in rules.children_named(value, ns("C", "supported-collation"))
    ]


def carddav_collations(value: RawValue) -> List[str]:
    return [
        text_content(v)
        for v in rules.children_named(value, ns("CR", "supported-collation"))
    ]


def schedule_calendar_transp(value: RawValue) -> Optional[str]:
    """"opaque" or "transparent", None if neither is given."""
    found = rules.children_named(value, ns("C", "opaque"), ns("C", "transparent"))
    if not found:
        return None
    return rules.element_key(found[0]).partition("}")[2]


def allowed_sharing_modes(value: RawValue) -> List[str]:
    return rules.child_keys(
        rules.children_named(
            value, ns("CS", "can-be-shared"), ns("CS", "can-be-published")
        )
    )


def invite(value: RawValue) -> List[Dict[str, Any]]:
    """
    Full view of an oc:invite: href, common-name, whether the invite
    was accepted and the access privileges of every sharee.
    """
    result = []
    for user in rules.children_named(value, ns("OC", "user")):
        children = [child for child in user if isinstance(child.tag, str)]
        common_name = rules.children_named(children, ns("OC", "common-name"))
        access = rules.children_named(children, ns("OC", "access"))
        result.append(
            {
                "href": rules.href(children),
                "common-name": text_content(common_name[0]) if common_name else "",
                "invite-accepted": len(
                    rules.children_named(children, ns("OC", "invite-accepted"))
                )
                == 1,
                "access": [
                    rules.element_key(a)
                    for a in (access[0] if access else [])
                    if isinstance(a.tag, str)
                ],
            }
        )
    return result


default_decoder = PropertyDecoder(
    [
        # RFC 4918 - HTTP Extensions for WebDAV
        (ns("D", "displayname"), text),
        (ns("D", "creationdate"), text),
        (ns("D", "getcontentlength"), decimal_int),
        (ns("D", "getcontenttype"), text),
        (ns("D", "getcontentlanguage"), text),
        (ns("D", "getlastmodified"), rules.http_date),
        (ns("D", "getetag"), text),
        (ns("D", "resourcetype"), rules.child_keys),
        # RFC 3744 - WebDAV Access Control Protocol
        (ns("D", "inherited-acl-set"), rules.hrefs),
        (ns("D", "group"), rules.href),
        (ns("D", "owner"), rules.href),
        (ns("D", "current-user-privilege-set"), privileges),
        (ns("D", "principal-collection-set"), rules.hrefs),
        (ns("D", "principal-URL"), rules.href),
        (ns("D", "alternate-URI-set"), rules.hrefs),
        (ns("D", "group-member-set"), rules.hrefs),
        (ns("D", "group-membership"), rules.hrefs),
        # RFC 5397 - WebDAV Current Principal Extension
        (ns("D", "current-user-principal"), current_user_principal),
        # RFC 6578 - Collection Synchronization for WebDAV
        (ns("D", "sync-token"), text),
        # RFC 6352 - CardDAV
        (ns("CR", "address-data"), text),
        (ns("CR", "addressbook-description"), text),
        (ns("CR", "supported-address-data"), address_data_types),
        (ns("CR", "max-resource-size"), decimal_int),
        (ns("CR", "addressbook-home-set"), rules.hrefs),
        (ns("CR", "principal-address"), rules.href),
        (ns("CR", "supported-collation-set"), carddav_collations),
        # RFC 4791 - CalDAV
        (ns("C", "calendar-data"), text),
        (ns("C", "calendar-home-set"), rules.hrefs),
        (ns("C", "calendar-description"), text),
        (ns("C", "calendar-timezone"), text),
        (ns("C", "supported-calendar-component-set"), component_names),
        (ns("C", "supported-calendar-data"), calendar_data_types),
        (ns("C", "max-resource-size"), decimal_int),
        (ns("C", "min-date-time"), ical_timestamp),
        (ns("C", "max-date-time"), ical_timestamp),
        (ns("C", "max-instances"), decimal_int),
        (ns("C", "max-attendees-per-instance"), decimal_int),
        (ns("C", "supported-collation-set"), caldav_collations),
        # RFC 6638 - Scheduling Extensions to CalDAV
        (ns("C", "schedule-outbox-URL"), rules.href),
        (ns("C", "schedule-inbox-URL"), rules.href),
        (ns("C", "calendar-user-address-set"), rules.hrefs),
        (ns("C", "calendar-user-type"), text),
        (ns("C", "schedule-calendar-transp"), schedule_calendar_transp),
        (ns("C", "schedule-default-calendar-URL"), rules.href),
        (ns("C", "schedule-tag"), text),
        # RFC 7809 - Time Zones by Reference
        (ns("C", "timezone-service-set"), rules.hrefs),
        (ns("C", "calendar-timezone-id"), text),
        # RFC 7953 - Calendar Availability
        (ns("C", "calendar-availability"), text),
        # Apple
        (ns("I", "calendar-order"), decimal_int),
        (ns("I", "calendar-color"), color),
        (ns("CS", "source"), rules.href),
        # draft-daboo-valarm-extensions
        (ns("C", "default-alarm-vevent-datetime"), text),
        (ns("C", "default-alarm-vevent-date"), text),
        (ns("C", "default-alarm-vtodo-datetime"), text),
        (ns("C", "default-alarm-vtodo-date"), text),
        # CalendarServer ctag, proxy and sharing extensions
        (ns("CS", "getctag"), text),
        (ns("CS", "calendar-proxy-read-for"), rules.hrefs),
        (ns("CS", "calendar-proxy-write-for"), rules.hrefs),
        (ns("CS", "allowed-sharing-modes"), allowed_sharing_modes),
        (ns("CS", "shared-url"), rules.href),
        (ns("SD", "owner-principal"), rules.href),
        (ns("SD", "read-only"), boolean),
        (ns("CS", "pre-publish-url"), rules.href),
        (ns("CS", "publish-url"), rules.href),
        # ownCloud / Nextcloud
        (ns("OC", "invite"), invite),
        (ns("OC", "calendar-enabled"), boolean),
        (ns("OC", "enabled"), boolean),
        (ns("OC", "read-only"), boolean),
        (ns("NC", "owner-displayname"), text),
        (ns("NC", "has-photo"), boolean),
        # sabre/dav
        (ns("SD", "email-address"), text),
    ]
)


def default_parser(props):
    return default_decoder.decode(props)
