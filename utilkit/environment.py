"""Request environment and process configuration helpers.

Request helpers read a WSGI ``environ`` mapping. When none is passed they use
the active Flask request, and outside of a request they fall back to
``os.environ`` the way a CGI script would see its server variables.
"""

from __future__ import annotations

import ipaddress
import logging
import os
import re
from typing import Mapping, Optional

from flask import has_request_context, request
from werkzeug.datastructures import Authorization

from .core.exceptions import UtilityRuntimeError
from .utils.validation import require_non_empty

__all__ = [
    "BOOLEAN_MAPPINGS",
    "PORT_SECURE",
    "PORT_UNSECURE",
    "server_var",
    "request_headers",
    "host",
    "ip_address",
    "is_https",
    "request_method",
    "url",
    "is_private_ip",
    "is_reserved_ip",
    "is_public_ip",
    "config_get",
    "config_set",
]

LOGGER = logging.getLogger(__name__)

Environ = Mapping[str, object]

BOOLEAN_MAPPINGS = {
    "yes": "1",
    "on": "1",
    "true": "1",
    "1": "1",
    "no": "0",
    "off": "0",
    "false": "0",
    "0": "0",
}

HOST_HEADERS = {
    "forwarded": "HTTP_X_FORWARDED_HOST",
    "server": "SERVER_NAME",
    "host": "HTTP_HOST",
    "default": "localhost",
}

HTTPS_HEADERS = {
    "default": "HTTPS",
    "forwarded": "HTTP_X_FORWARDED_PROTO",
    "frontend": "HTTP_FRONT_END_HTTPS",
}

IP_ADDRESS_HEADERS = {
    "cloudflare": "HTTP_CF_CONNECTING_IP",
    "forwarded": "HTTP_X_FORWARDED_FOR",
    "realip": "HTTP_X_REAL_IP",
    "client": "HTTP_CLIENT_IP",
    "default": "REMOTE_ADDR",
}

REQUEST_HEADERS = {
    "override": "HTTP_X_HTTP_METHOD_OVERRIDE",
    "method": "REQUEST_METHOD",
    "default": "GET",
}

PORT_SECURE = 443
PORT_UNSECURE = 80

_VALID_HOST = re.compile(r"^\[?[a-z0-9\-:\]_]+(?:\.[a-z0-9\-:\]_]+)*\.?$")

# Ranges excluded by "no private range" IP validation.
_PRIVATE_NETWORKS = tuple(
    ipaddress.ip_network(network)
    for network in ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16", "fc00::/7")
)
# Ranges excluded by "no reserved range" IP validation.
_RESERVED_NETWORKS = tuple(
    ipaddress.ip_network(network)
    for network in (
        "0.0.0.0/8",
        "127.0.0.0/8",
        "169.254.0.0/16",
        "240.0.0.0/4",
        "::/128",
        "::1/128",
        "::ffff:0:0/96",
        "fe80::/10",
    )
)


def _environ(environ: Optional[Environ]) -> Environ:
    if environ is not None:
        return environ
    if has_request_context():
        return request.environ
    return os.environ


def server_var(name: str, default: object = "", environ: Optional[Environ] = None) -> object:
    """Return a server variable, or ``default`` when it is missing or ``None``."""

    value = _environ(environ).get(name)
    return default if value is None else value


def _text(name: str, environ: Environ, default: str = "") -> str:
    return str(server_var(name, default, environ)).strip()


def request_headers(environ: Optional[Environ] = None) -> dict[str, str]:
    """Return the HTTP request headers found in the environment, keyed by header name."""

    headers: dict[str, str] = {}
    for key, value in _environ(environ).items():
        if key.startswith("HTTP_"):
            name = key[5:]
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH"):
            name = key
        else:
            continue
        headers[name.replace("_", "-").title()] = str(value)
    return headers


def host(strip_www: bool = False, accept_forwarded: bool = False, environ: Optional[Environ] = None) -> str:
    """Return the current host name, lower-cased.

    ``X-Forwarded-Host`` is only honoured with ``accept_forwarded``. An
    empty or malformed host falls back to ``localhost``.
    """

    env = _environ(environ)
    forwarded = _text(HOST_HEADERS["forwarded"], env)

    if accept_forwarded and forwarded:
        current = forwarded
    else:
        current = _text(HOST_HEADERS["host"], env) or _text(HOST_HEADERS["server"], env)

    current = current.lower()
    if not current or not _VALID_HOST.match(current):
        current = HOST_HEADERS["default"]

    if strip_www and current.startswith("www."):
        current = current[4:]
    return current


def _parse_ip(value: str) -> Optional[ipaddress.IPv4Address | ipaddress.IPv6Address]:
    try:
        return ipaddress.ip_address(value.strip())
    except ValueError:
        return None


def is_private_ip(address: str) -> bool:
    """Return whether ``address`` is in a private range. Invalid addresses count as private."""

    parsed = _parse_ip(address)
    if parsed is None:
        return True
    return any(parsed in network for network in _PRIVATE_NETWORKS if network.version == parsed.version)


def is_reserved_ip(address: str) -> bool:
    """Return whether ``address`` is in a reserved range. Invalid addresses count as reserved."""

    parsed = _parse_ip(address)
    if parsed is None:
        return True
    return any(parsed in network for network in _RESERVED_NETWORKS if network.version == parsed.version)


def is_public_ip(address: str) -> bool:
    return not is_private_ip(address) and not is_reserved_ip(address)


def ip_address(trust_proxy: bool = False, environ: Optional[Environ] = None) -> str:
    """Return the visitor's IP address.

    A Cloudflare ``CF-Connecting-IP`` header takes the place of the remote
    address. With ``trust_proxy`` the last public address listed in
    ``X-Forwarded-For`` (or ``X-Real-IP``) wins, then ``Client-IP``.
    """

    env = _environ(environ)
    remote = _text(IP_ADDRESS_HEADERS["cloudflare"], env) or _text(IP_ADDRESS_HEADERS["default"], env)

    if not trust_proxy:
        return remote

    forwarded = _text(IP_ADDRESS_HEADERS["forwarded"], env)
    realip = _text(IP_ADDRESS_HEADERS["realip"], env)
    candidates = (forwarded or realip).split(",") if (forwarded or realip) else []

    address = ""
    for candidate in (value.strip() for value in candidates):
        if candidate and is_public_ip(candidate):
            address = candidate

    if not address:
        address = _text(IP_ADDRESS_HEADERS["client"], env) or remote
    return address


def is_https(environ: Optional[Environ] = None) -> bool:
    """Return whether the request came in over TLS, directly or through a proxy."""

    env = _environ(environ)
    server = _text(HTTPS_HEADERS["default"], env).lower()
    if server and server != "off":
        return True
    if str(env.get("wsgi.url_scheme", "")).lower() == "https":
        return True

    forwarded = _text(HTTPS_HEADERS["forwarded"], env).lower()
    frontend = _text(HTTPS_HEADERS["frontend"], env).lower()
    return forwarded == "https" or (frontend not in ("", "off"))


def request_method(environ: Optional[Environ] = None) -> str:
    """Return the request method, honouring ``X-HTTP-Method-Override``."""

    env = _environ(environ)
    method = (
        _text(REQUEST_HEADERS["override"], env)
        or _text(REQUEST_HEADERS["method"], env)
        or REQUEST_HEADERS["default"]
    )
    return method.upper()


def url(environ: Optional[Environ] = None) -> str:
    """Rebuild the URL of the current request."""

    env = _environ(environ)
    secure = is_https(env)
    scheme = "https://" if secure else "http://"

    auth = ""
    credentials = Authorization.from_header(_text("HTTP_AUTHORIZATION", env) or None)
    if credentials is not None and credentials.type == "basic":
        auth = f"{credentials.username or ''}:{credentials.password or ''}@"
        if auth == ":@":
            auth = ""

    port_text = _text("SERVER_PORT", env)
    port = int(port_text) if port_text.isdigit() else 0
    default_port = PORT_SECURE if secure else PORT_UNSECURE
    port_suffix = "" if port in (0, default_port) else f":{port}"

    path = _text("REQUEST_URI", env)
    if not path:
        path = _text("SCRIPT_NAME", env) + _text("PATH_INFO", env)
        query = _text("QUERY_STRING", env)
        if query:
            path = f"{path}?{query}"

    return f"{scheme}{auth}{host(environ=env)}{port_suffix}{path}"


def config_get(option: str, standardize: bool = False) -> str:
    """Read a process configuration value (an environment variable).

    With ``standardize`` boolean-like values are mapped to ``"1"`` or ``"0"``.
    """

    option = require_non_empty(option, argument="option")
    value = os.environ.get(option)
    if value is None:
        raise UtilityRuntimeError(f"Configuration option {option!r} does not exist.", details={"option": option})

    value = value.strip()
    if standardize:
        return BOOLEAN_MAPPINGS.get(value.lower(), value)
    return value


def config_set(option: str, value: object) -> Optional[str]:
    """Set a process configuration value and return the previous one, if any."""

    option = require_non_empty(option, argument="option")
    previous = os.environ.get(option)
    os.environ[option] = "" if value is None else _stringify(value)
    LOGGER.debug("Configuration option %s updated", option)
    return previous


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
