#!/usr/bin/env python
import logging
import os
from typing import Any
from typing import Optional

from davprops import __version__

## Environment variables prepended with "PYTHON_DAVPROPS" are used for debug purposes.
## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_DAVPROPS_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("davprops")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons):
    from davprops.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class AttachError(DAVError):
    """
    An error that carries arbitrary context along with it.

    Every keyword argument becomes an attribute on the exception, so
    the code catching it can inspect e.g. the status and body of the
    response that caused it::

        raise AttachError(status=403, body=b"...", url="/dav/calendars/")
    """

    def __init__(self, **attach: Any) -> None:
        super(AttachError, self).__init__(
            url=attach.pop("url", None), reason=attach.pop("reason", None)
        )
        for key, value in attach.items():
            setattr(self, key, value)
        self.attached = dict(attach)


class ResponseError(DAVError):
    pass
