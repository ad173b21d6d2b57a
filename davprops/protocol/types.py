"""
Core types for the property decoding layer.

The decoders work on raw property values as produced by the XML
extraction in :mod:`davprops.protocol.xml_parsers`: plain text, or a
list of element handles.  An element handle is anything that offers
attribute lookup and text content; lxml elements qualify as-is.
"""

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Iterator
from typing import List
from typing import Protocol
from typing import TypedDict
from typing import Union
from typing import runtime_checkable


@runtime_checkable
class ElementHandle(Protocol):
    """Minimal view of an XML element needed by the decoders."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def itertext(self) -> Iterator[str]: ...


def text_content(handle: ElementHandle) -> str:
    """All text below the handle, concatenated (like DOM textContent)."""
    return "".join(handle.itertext())


## What a decoding rule gets for one property
RawValue = Union[str, List[ElementHandle], None]


class _Invalid:
    """
    Marker for a value that was present but could not be decoded,
    e.g. a non-numeric max-resource-size or a garbled min-date-time.

    There is exactly one instance, ``INVALID``.  It is falsy, so
    ``if value:`` treats it like a missing value, while ``value is INVALID``
    still tells it apart from ``None``.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "<invalid>"

    def __reduce__(self):
        return (_Invalid, ())


INVALID = _Invalid()


class CalendarComponents(TypedDict):
    vevent: bool
    vjournal: bool
    vtodo: bool


## "content-type" isn't a valid identifier, hence the functional syntax
DataType = TypedDict("DataType", {"content-type": Any, "version": Any})


@dataclass
class PropstatResult:
    """
    Raw properties of one resource in a multistatus response.

    Attributes:
        href: path of the resource, as sent by the server
        properties: property key -> raw value (text or list of elements)
    """

    href: str
    properties: dict[str, Any] = field(default_factory=dict)
