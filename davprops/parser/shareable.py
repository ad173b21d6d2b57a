"""
Decoding of sharing related properties: the ownCloud/Nextcloud
``oc:invite`` list and CalendarServer's ``allowed-sharing-modes``.
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


def _first(elem, tag):
    return next(iter(elem.iter(tag)), None)


def invite(value: RawValue) -> Optional[List[Dict[str, Any]]]:
    """
    Shares of a collection, as a list of
    ``{"href": ..., "displayName": ..., "writable": ...}``.

    Users without an href or without an access element are left out.
    """
    if not isinstance(value, list):
        return None

    shares = []
    for user in value:
        href = _first(user, ns("D", "href"))
        if href is None:
            continue

        display_name = _first(user, ns("OC", "common-name"))

        access = _first(user, ns("OC", "access"))
        if access is None:
            continue

        shares.append(
            {
                "href": text_content(href),
                "displayName": None
                if display_name is None
                else text_content(display_name),
                "writable": _first(access, ns("OC", "read-write")) is not None,
            }
        )

    return shares


def allowed_sharing_modes(value: RawValue) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    return [rules.element_key(v) for v in value]


shareable_decoder = PropertyDecoder(
    [
        (ns("OC", "invite"), invite),
        (ns("CS", "allowed-sharing-modes"), allowed_sharing_modes),
    ]
)


def shareable_parser(props):
    return shareable_decoder.decode(props)
