#!/usr/bin/env python
from typing import Dict
from typing import Optional
from typing import Tuple

DAV = "DAV:"
IETF_CALDAV = "urn:ietf:params:xml:ns:caldav"
IETF_CARDDAV = "urn:ietf:params:xml:ns:carddav"
OWNCLOUD = "http://owncloud.org/ns"
NEXTCLOUD = "http://nextcloud.com/ns"
APPLE = "http://apple.com/ns/ical/"
CALENDARSERVER = "http://calendarserver.org/ns/"
SABREDAV = "http://sabredav.org/ns"

## Prefixes used with ns() to build "{namespace}local-name" keys
nsmap: Dict[str, str] = {
    "D": DAV,
    "C": IETF_CALDAV,
    "CR": IETF_CARDDAV,
    "I": APPLE,
    "CS": CALENDARSERVER,
    "OC": OWNCLOUD,
    "NC": NEXTCLOUD,
    "SD": SABREDAV,
}


def ns(prefix: str, tag: Optional[str] = None) -> str:
    name = "{%s}" % nsmap[prefix]
    if tag is not None:
        name = "%s%s" % (name, tag)
    return name


def split_key(key: str) -> Tuple[str, str]:
    """
    Split a "{namespace}local-name" key into (namespace, local-name).

    A key without a namespace part gives an empty namespace.
    """
    if key.startswith("{") and "}" in key:
        namespace, _, local = key[1:].partition("}")
        return namespace, local
    return "", key
