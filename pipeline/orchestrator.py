"""
Single-scan orchestrator: resolve, probe, and stream the plain-text report
to an output stream as results arrive. Nothing is persisted.
"""

import logging
import sys
import time
from typing import List, Optional, TextIO

from core.models import ScanRequest, ScanSummary
from pipeline import stages

log = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout

    def _emit(self, line: str = "") -> None:
        print(line, file=self.out, flush=True)

    def scan(self, request: ScanRequest) -> ScanSummary:
        """Raises ResolutionError before any port is touched if the target does not resolve."""
        port_range = request.port_range()
        address = stages.pass0_resolve(request.target)

        self._emit(
            f"Scanning {request.target} ({address}) ports {port_range.start}-{port_range.end} "
            f"with timeout {request.timeout_ms} ms"
        )
        self._emit()

        log.info("scan start | target=%s | ip=%s | ports=%d", request.target, address, len(port_range))
        started = time.monotonic()
        found_any = stages.pass1_l4_discovery(
            address,
            port_range,
            request.timeout_ms,
            on_open=lambda port: self._emit(f"Port {port} is OPEN"),
        )
        log.info("scan done | target=%s | found_any=%s | %.2fs", request.target, found_any, time.monotonic() - started)

        self._emit()
        self._emit(stages.summary_line(found_any))

        return ScanSummary(
            target=request.target,
            address=address,
            port_range=port_range,
            timeout_ms=request.timeout_ms,
            found_any=found_any,
        )


def open_ports(request: ScanRequest) -> List[int]:
    """
    Library entry point: run the discovery pass without writing the report
    and return the open ports in ascending order. Raises ResolutionError
    like Orchestrator.scan.
    """
    found: List[int] = []
    address = stages.pass0_resolve(request.target)
    stages.pass1_l4_discovery(address, request.port_range(), request.timeout_ms, on_open=found.append)
    return found
