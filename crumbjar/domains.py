"""
Host and domain computations used to scope cookies (RFC 2965, section 1).

Unqualified host names get a synthetic ``.local`` suffix so they never
collide with internet domains, and a cookie domain may reach at most one
level above the request host. No public suffix list is consulted.
"""

from __future__ import annotations

import ipaddress
import re

from .utils import RequestURI

_DOMLABEL = r"(?:[a-zA-Z0-9](?:[-a-zA-Z0-9]*[a-zA-Z0-9])?)"
_TOPLABEL = r"(?:[a-zA-Z](?:[-a-zA-Z0-9]*[a-zA-Z0-9])?)"

# One leading label, then either two or more labels or the literal "local".
BASE_HOSTNAME = re.compile(
    rf"(?:{_DOMLABEL}\.)(?:((?:(?:{_DOMLABEL}\.)+(?:{_TOPLABEL}\.?))|local))"
)
BASE_PATH = re.compile(r"\A((?:[^/?#]*/)*)")
# A dot or colon with at least one character on each side.
INTERIOR_SEPARATOR = re.compile(r".[.:].")

LOCAL_DOMAIN = ".local"


def is_ip_address(value: str) -> bool:
    """Return True if ``value`` is exactly an IPv4 or IPv6 literal."""
    # ipaddress accepts zone ids such as fe80::1%eth0
    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def effective_host(host: str) -> str:
    """
    Compute the effective host name (RFC 2965, section 1).

    Interior dots mark qualified names and interior colons mark IPv6
    literals; both are returned lower-cased. Anything else gets ``.local``
    appended.
    """
    hostname = host.lower()
    if INTERIOR_SEPARATOR.search(hostname) or hostname == LOCAL_DOMAIN:
        return hostname
    return hostname + LOCAL_DOMAIN


def hostname_reach(host: str) -> str | None:
    """
    Return the next superdomain ``host`` may reach, or None when there is
    no valid one (single labels, two-label names such as ``example.com``).
    """
    match = BASE_HOSTNAME.search(host.lower())
    if match:
        return match.group(1)
    return None


def compute_search_domains_for_host(host: str) -> list[str]:
    """
    Domain strings a stored cookie may carry and still be sent to ``host``:
    the effective host, its dotted form and the dotted reach. IP literals
    only match themselves.
    """
    host = effective_host(host)
    result = [host]
    if not is_ip_address(host):
        result.append(f".{host}")
        base = hostname_reach(host)
        if base:
            result.append(f".{base}")
    return result


def compute_search_domains(request_uri: RequestURI) -> list[str]:
    return compute_search_domains_for_host(request_uri.host)


def domains_match(tested_domain: str, base_domain: str) -> str | None:
    """
    Check whether ``tested_domain`` is reachable from ``base_domain``.

    Returns the matching search domain, or None. Matching is by exact
    equality against the finite search list, never by suffix.
    """
    for domain in compute_search_domains_for_host(base_domain):
        if domain == tested_domain:
            return domain
    return None


def cookie_base_path(path: str) -> str:
    """Truncate ``path`` after its last ``/``; ``""`` when there is none."""
    return BASE_PATH.match(path).group(1)
