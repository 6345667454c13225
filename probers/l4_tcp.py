"""
TCP connect prober using a non-blocking connect() and a bounded wait for
writability, without crafting raw packets. One socket per probe, closed
before the next one starts.
"""

import errno
import logging
import selectors
import socket
import time
from typing import Iterable, Iterator, Tuple

log = logging.getLogger(__name__)

_IN_PROGRESS = {errno.EINPROGRESS, errno.EWOULDBLOCK, errno.EAGAIN}


def wait_writable(sock: socket.socket, timeout_s: float) -> bool:
    """Block until `sock` is writable or `timeout_s` has elapsed."""
    deadline = time.monotonic() + timeout_s
    with selectors.DefaultSelector() as sel:
        sel.register(sock, selectors.EVENT_WRITE)
        while True:
            remaining = max(0.0, deadline - time.monotonic())
            if sel.select(remaining):
                return True
            if time.monotonic() >= deadline:
                return False


def tcp_probe(ip: str, port: int, timeout_ms: int = 300) -> bool:
    """
    True when the TCP handshake with (ip, port) completes within
    `timeout_ms`. Refused, filtered, timed out and malformed addresses are
    all just "not open".
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        log.debug("socket() failed | port=%s | err=%s", port, exc)
        return False
    try:
        sock.setblocking(False)
        try:
            socket.inet_pton(socket.AF_INET, ip)
        except OSError:
            log.debug("malformed address %r", ip)
            return False

        rc = sock.connect_ex((ip, port))
        if rc == 0:
            log.debug("%s:%s connected immediately", ip, port)
            return True
        if rc not in _IN_PROGRESS:
            log.debug("%s:%s connect failed: %s", ip, port, errno.errorcode.get(rc, rc))
            return False

        if not wait_writable(sock, timeout_ms / 1000.0):
            log.debug("%s:%s timed out after %d ms", ip, port, timeout_ms)
            return False

        err = sock.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR)
        if err:
            log.debug("%s:%s handshake failed: %s", ip, port, errno.errorcode.get(err, err))
        return err == 0
    except (OSError, OverflowError) as exc:
        log.debug("%s:%s probe error: %s", ip, port, exc)
        return False
    finally:
        sock.close()


def scan_ports(ip: str, ports: Iterable[int], timeout_ms: int = 300) -> Iterator[Tuple[int, bool]]:
    for port in ports:
        yield port, tcp_probe(ip, port, timeout_ms=timeout_ms)
