"""HTTP request methods from the IANA Hypertext Transfer Protocol Method Registry."""

from __future__ import annotations

from enum import Enum

__all__ = ["Method"]


class Method(Enum):
    ACL = "ACL"
    BASELINE_CONTROL = "BASELINE-CONTROL"
    BIND = "BIND"
    CHECKIN = "CHECKIN"
    CHECKOUT = "CHECKOUT"
    CONNECT = "CONNECT"
    COPY = "COPY"
    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    LABEL = "LABEL"
    LINK = "LINK"
    LOCK = "LOCK"
    MERGE = "MERGE"
    MKACTIVITY = "MKACTIVITY"
    MKCALENDAR = "MKCALENDAR"
    MKCOL = "MKCOL"
    MKREDIRECTREF = "MKREDIRECTREF"
    MKWORKSPACE = "MKWORKSPACE"
    MOVE = "MOVE"
    OPTIONS = "OPTIONS"
    ORDERPATCH = "ORDERPATCH"
    PATCH = "PATCH"
    POST = "POST"
    PRI = "PRI"
    PROPFIND = "PROPFIND"
    PROPPATCH = "PROPPATCH"
    PUT = "PUT"
    REBIND = "REBIND"
    REPORT = "REPORT"
    SEARCH = "SEARCH"
    TRACE = "TRACE"
    UNBIND = "UNBIND"
    UNCHECKOUT = "UNCHECKOUT"
    UNLINK = "UNLINK"
    UNLOCK = "UNLOCK"
    UPDATE = "UPDATE"
    UPDATEREDIRECTREF = "UPDATEREDIRECTREF"
    VERSION_CONTROL = "VERSION-CONTROL"

    @property
    def is_safe(self) -> bool:
        """Whether the method is read-only on the server."""
        return self in _SAFE

    @property
    def is_idempotent(self) -> bool:
        """Whether repeating the request has the same effect as sending it once."""
        return self not in _NOT_IDEMPOTENT


_SAFE = frozenset(
    {
        Method.GET,
        Method.HEAD,
        Method.OPTIONS,
        Method.PRI,
        Method.PROPFIND,
        Method.REPORT,
        Method.SEARCH,
        Method.TRACE,
    }
)
_NOT_IDEMPOTENT = frozenset({Method.CONNECT, Method.LOCK, Method.PATCH, Method.POST})
