"""Decoding of CardDAV address book properties (RFC 6352)."""

from davprops.lib.namespace import ns

from . import rules
from .base import PropertyDecoder

addressbook_decoder = PropertyDecoder(
    [
        (ns("CR", "addressbook-description"), rules.text),
        (ns("CS", "getctag"), rules.text),
        (ns("CR", "max-resource-size"), rules.decimal_int),
        (ns("OC", "enabled"), rules.boolean),
        (ns("OC", "read-only"), rules.boolean),
        (ns("CR", "supported-address-data"), rules.data_types),
    ]
)


def addressbook_parser(props):
    return addressbook_decoder.decode(props)
