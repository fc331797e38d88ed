"""
Rules for turning a Set-Cookie header into cookie attributes and for
deciding whether a cookie may be stored for the request it arrived on.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING, Any

from .domains import cookie_base_path, domains_match, effective_host, is_ip_address
from .errors import InvalidCookieError, MalformedCookieError
from .utils import RequestURI

if TYPE_CHECKING:
    from .models import Cookie

TOKEN = r'[^(),/<>@;:\\"\[\]?={}\s]*'
PARAM1 = re.compile(rf"({TOKEN})(?:=([^;]*))?")
PARAM_SEPARATOR = re.compile(r";\s*")
# Contains a dot with something on both sides.
EMBEDDED_DOT = re.compile(r".\..")


def determine_cookie_path(request_uri: RequestURI, cookie_path: str | None) -> str:
    """
    Path a cookie applies to. Without an explicit path the directory of the
    request path is used. An explicit path is kept verbatim even when it does
    not match the request; ``validate_cookie`` rejects that case.
    """
    if not cookie_path:
        return cookie_base_path(request_uri.path)
    return cookie_path


def determine_cookie_domain(request_uri: RequestURI, cookie_domain: str | None) -> str:
    """
    Domain a cookie applies to.

    Without an explicit domain the cookie is scoped to the exact request host
    (``foo.com``, no leading dot). An explicit ``foo.com`` is widened to
    ``.foo.com`` so it also covers subdomains. IP literals are kept as-is.
    """
    if not cookie_domain:
        return effective_host(request_uri.host)
    domain = cookie_domain.lower()
    if is_ip_address(domain) or domain.startswith("."):
        return domain
    return f".{domain}"


def _parse_expires(value: str | None, header: str) -> datetime:
    if not value:
        raise MalformedCookieError(
            f"Missing expires value in cookie '{header}'", header, value
        )
    try:
        expires_at = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError) as exc:
        raise MalformedCookieError(
            f"Invalid expires value '{value}' in cookie '{header}'", header, value
        ) from exc
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at


def parse_set_cookie(set_cookie_value: str) -> dict[str, Any]:
    """
    Parse a legacy ``Set-Cookie`` header value into an attribute mapping.

    Recognised attributes are ``Expires``, ``Domain``, ``Path``, ``Secure``
    and ``HttpOnly`` (case-insensitive). Any other key is the cookie name; if
    several appear, the last one wins. ``version`` is always 0.

    Raises:
        MalformedCookieError: a segment breaks the ``token[=value]`` grammar
            or the expiry date cannot be parsed.
    """
    args: dict[str, Any] = {}
    for param in PARAM_SEPARATOR.split(set_cookie_value):
        if not param:
            continue
        result = PARAM1.fullmatch(param)
        if not result:
            raise MalformedCookieError(
                f"Invalid cookie parameter '{param}' in cookie '{set_cookie_value}'",
                set_cookie_value,
                param,
            )
        key, value = result.group(1), result.group(2)
        lowered = key.lower()
        if lowered == "expires":
            args["expires_at"] = _parse_expires(value, set_cookie_value)
        elif lowered == "domain":
            args["domain"] = value
        elif lowered == "path":
            args["path"] = value
        elif lowered == "secure":
            args["secure"] = True
        elif lowered == "httponly":
            args["http_only"] = True
        else:
            args["name"] = key
            args["value"] = value or ""
    args["version"] = 0
    return args


def cookie_errors(request_uri: RequestURI, cookie: Cookie) -> list[str]:
    """
    Collect every storage rule ``cookie`` breaks for ``request_uri``
    (RFC 2965, section 3.3.2). An empty list means the cookie is acceptable.
    """
    errors: list[str] = []
    domain = cookie.domain

    # Legacy Set-Cookie headers always carry an implicit version 0.
    if cookie.version is None:
        errors.append("Version missing")

    if not request_uri.path.startswith(cookie.path):
        errors.append("Path is not a prefix of the request uri path")

    if not (
        is_ip_address(domain)
        or EMBEDDED_DOT.search(domain)
        or domain == ".local"
    ):
        errors.append("Domain format is illegal")

    if not domains_match(domain, request_uri.host):
        errors.append("Domain is inappropriate based on request URI hostname")

    # No port list, or an empty one, allows every port.
    if cookie.ports and request_uri.port not in cookie.ports:
        errors.append("Ports list does not contain request URI port")

    return errors


def validate_cookie(request_uri: RequestURI, cookie: Cookie) -> bool:
    """
    Check that ``cookie`` may be stored for ``request_uri``.

    Returns True, or raises InvalidCookieError listing every violated rule.
    ``secure`` and ``http_only`` are not checked here.
    """
    errors = cookie_errors(request_uri, cookie)
    if errors:
        raise InvalidCookieError(errors)
    return True
