"""
Decoding of the generic WebDAV collection properties (RFC 4918, RFC 3744,
RFC 6578).  These apply to calendars and address books alike.
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

PRINCIPAL = ns("D", "principal")
GRANT = ns("D", "grant")
PRIVILEGE = ns("D", "privilege")


def _children(elem) -> list:
    return [child for child in elem if isinstance(child.tag, str)]


def acl(value: RawValue) -> Optional[List[Dict[str, Any]]]:
    """
    Simplified view of a DAV:acl.

    Returns one entry per principal, aces for the same principal are
    merged.  Only granted privileges are collected, deny, protect and
    inherit stay empty.
    """
    if not isinstance(value, list):
        return None

    ## TODO: deny, protected and inherited (RFC 3744 section 5.5)
    simple: List[Dict[str, Any]] = []

    for ace in value:
        principal: Dict[str, Any] = {}
        for ace_child in _children(ace):
            if ace_child.tag != PRINCIPAL:
                continue
            principal_children = _children(ace_child)
            if not principal_children:
                break
            principal_child = principal_children[0]
            principal["type"] = rules.element_key(principal_child).partition("}")[2]
            if principal["type"] == "href":
                principal["href"] = text_content(principal_child)
            break

        for entry in simple:
            if entry["principal"].get("type") == principal.get("type") and entry[
                "principal"
            ].get("href") == principal.get("href"):
                obj = entry
                break
        else:
            obj = {
                "principal": principal,
                "grant": [],
                "deny": [],
                "protect": [],
                "inherit": [],
            }
            simple.append(obj)

        for ace_child in _children(ace):
            if ace_child.tag != GRANT:
                continue
            for grant_child in _children(ace_child):
                if grant_child.tag != PRIVILEGE:
                    continue
                privileges = _children(grant_child)
                if privileges:
                    obj["grant"].append(rules.element_key(privileges[0]))

    return simple


def owner(value: RawValue) -> Optional[str]:
    if not isinstance(value, list) or not value:
        return None
    return text_content(value[0])


def resource_type(value: RawValue) -> List[str]:
    if not isinstance(value, list):
        return []
    return [rules.element_key(v) for v in value]


collection_decoder = PropertyDecoder(
    [
        (ns("D", "acl"), acl),
        (ns("D", "displayname"), rules.text),
        (ns("D", "sync-token"), rules.text),
        (ns("D", "owner"), owner),
        (ns("D", "resourcetype"), resource_type),
    ]
)


def collection_parser(props):
    return collection_decoder.decode(props)
