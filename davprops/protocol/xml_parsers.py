"""
Pure functions for pulling raw properties out of WebDAV XML responses.

All functions in this module are pure - they take XML bytes in and return
structured data out, with no side effects or I/O.  Decoding the raw values
into typed ones is left to :mod:`davprops.parser`.
"""

import logging
from typing import Any
from typing import Callable
from typing import Mapping

from lxml import etree
from lxml.etree import _Element

from davprops.lib import error
from davprops.lib.namespace import ns

from .types import PropstatResult

log = logging.getLogger(__name__)

MULTISTATUS = ns("D", "multistatus")
RESPONSE = ns("D", "response")
HREF = ns("D", "href")
PROPSTAT = ns("D", "propstat")
PROP = ns("D", "prop")
STATUS = ns("D", "status")


def parse_prop_node(elem: _Element) -> Any:
    """
    Reduce a single property element to its raw value.

    Elements with child elements give the list of those children,
    anything else gives the text content (empty string if there is none).
    Comments and processing instructions are not children in this sense.
    """
    children = [child for child in elem if isinstance(child.tag, str)]
    if children:
        return children
    return "".join(elem.itertext())


def parse_prop(prop: _Element) -> dict[str, Any]:
    """
    Parse a DAV:prop element into a key -> raw value dict.

    Keys are "{namespace}local-name", in document order.
    """
    properties: dict[str, Any] = {}
    for child in prop:
        if not isinstance(child.tag, str):
            continue
        properties[child.tag] = parse_prop_node(child)
    return properties


def parse_multistatus(
    body: bytes,
    huge_tree: bool = False,
) -> list[PropstatResult]:
    """
    Parse a 207 Multi-Status response body.

    Only propstats with a 2xx status contribute properties; a property
    that was not found (404) or not permitted (403) is simply absent.

    Args:
        body: Raw XML response bytes
        huge_tree: Allow parsing very large XML documents

    Returns:
        One PropstatResult per DAV:response element, in document order

    Raises:
        ResponseError: If body is not valid XML
    """
    parser = etree.XMLParser(huge_tree=huge_tree)
    try:
        tree = etree.fromstring(body, parser)
    except etree.XMLSyntaxError as e:
        raise error.ResponseError(reason=f"invalid multistatus body: {e}") from e

    results: list[PropstatResult] = []

    for elem in _strip_to_multistatus(tree):
        if elem.tag != RESPONSE:
            continue

        href = elem.findtext(HREF) or ""
        properties: dict[str, Any] = {}

        for propstat in elem.iterfind(PROPSTAT):
            status = propstat.findtext(STATUS)
            code = _status_to_code(status)
            if not 200 <= code < 300:
                log.debug(f"skipping propstat with status {status!r} for {href}")
                continue

            prop = propstat.find(PROP)
            if prop is None:
                continue
            properties.update(parse_prop(prop))

        results.append(PropstatResult(href=href, properties=properties))

    return results


def parse_multistatus_properties(
    body: bytes,
    huge_tree: bool = False,
) -> dict[str, dict[str, Any]]:
    """
    Parse a multistatus body into {href: {property key: raw value}}.

    If the server repeats an href, the later response wins.
    """
    return {
        result.href: result.properties
        for result in parse_multistatus(body, huge_tree=huge_tree)
    }


def decode_multistatus(
    body: bytes,
    decoder: Callable[[Mapping[str, Any]], dict[str, Any]],
    huge_tree: bool = False,
) -> dict[str, dict[str, Any]]:
    """
    Parse a multistatus body and run every resource's properties through
    ``decoder`` (e.g. :func:`davprops.parser.calendar.calendar_parser`).
    """
    raw = parse_multistatus_properties(body, huge_tree=huge_tree)
    return {href: decoder(properties) for href, properties in raw.items()}


# Helper functions


def _strip_to_multistatus(tree: _Element) -> _Element | list[_Element]:
    """
    Strip outer elements to get to the multistatus content.

    The general format is:
        <xml><multistatus>
            <response>...</response>
            <response>...</response>
        </multistatus></xml>

    But sometimes multistatus and/or xml element is missing.
    Returns the element(s) containing responses.
    """
    if tree.tag == "xml" and len(tree) > 0 and tree[0].tag == MULTISTATUS:
        return tree[0]
    if tree.tag == MULTISTATUS:
        return tree
    return [tree]


def _status_to_code(status: str | None) -> int:
    """
    Extract status code from status string like "HTTP/1.1 200 OK".

    A propstat without status is taken as successful; an unparseable
    one is reported as 0 so that it gets skipped.
    """
    if not status:
        return 200

    parts = status.split()
    if len(parts) >= 2:
        try:
            return int(parts[1])
        except ValueError:
            pass

    error.weirdness("unparseable status line", status)
    return 0
