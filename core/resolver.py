"""
Target resolution: IPv4 literal or hostname -> one dotted-quad address.
Only A records are considered; an IPv6-only name does not resolve.
"""

import ipaddress
import logging
import socket

from core.errors import ResolutionError

log = logging.getLogger(__name__)


def _ipv4_literal(host: str):
    try:
        return ipaddress.IPv4Address(host)
    except ValueError:
        return None


def resolve_ipv4(host: str) -> str:
    """
    Return the canonical IPv4 address for `host`.

    Literals are returned without a lookup. For names the first address
    handed back by getaddrinfo wins; that order is up to the resolver and
    must not be relied on.
    """
    literal = _ipv4_literal(host)
    if literal is not None:
        log.debug("target %s is an IPv4 literal", host)
        return str(literal)

    try:
        infos = socket.getaddrinfo(host, None, socket.AF_INET, socket.SOCK_STREAM)
    except (OSError, UnicodeError) as exc:
        log.warning("resolution failed | target=%s | err=%s", host, exc)
        raise ResolutionError(host) from exc
    if not infos:
        log.warning("resolution returned no IPv4 addresses | target=%s", host)
        raise ResolutionError(host)

    address = _ipv4_literal(infos[0][4][0])
    if address is None:
        raise ResolutionError(host)
    log.debug("resolved %s -> %s (%d candidates)", host, address, len(infos))
    return str(address)
