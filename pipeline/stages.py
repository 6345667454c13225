"""
Three-phase state machine (single process, single thread):
INPUT: a validated ScanRequest (built by the CLI)
SCANNING: resolve the target once, then probe each port in ascending order
DONE: report whether anything answered
"""

import logging
from typing import Callable, Optional

from core.models import PortRange
from core.resolver import resolve_ipv4
from probers import l4_tcp

log = logging.getLogger(__name__)

OnOpen = Callable[[int], None]


def pass0_resolve(target: str) -> str:
    return resolve_ipv4(target)


def pass1_l4_discovery(address: str, port_range: PortRange, timeout_ms: int, on_open: Optional[OnOpen] = None) -> bool:
    """
    Probe every port of `port_range` exactly once and hand each open port
    to `on_open` as soon as it is found. Returns whether any port was open.
    """
    found_any = False
    for port, is_open in l4_tcp.scan_ports(address, port_range.ports(), timeout_ms=timeout_ms):
        if not is_open:
            continue
        found_any = True
        if on_open is not None:
            on_open(port)
    return found_any


def summary_line(found_any: bool) -> str:
    return "Scan complete." if found_any else "No open ports found in range."
