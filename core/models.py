"""
Shared data models for one scan invocation: Target -> PortRange -> summary.
Everything here is transient and lives only as long as the process.
"""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from core.config import MAX_TIMEOUT_MS, settings

MIN_PORT = 1
MAX_PORT = 65535


def _clamp(port: int) -> int:
    return min(max(port, MIN_PORT), MAX_PORT)


class PortRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=MIN_PORT, le=MAX_PORT)
    end: int = Field(ge=MIN_PORT, le=MAX_PORT)

    @classmethod
    def normalized(cls, start: int, end: int) -> PortRange:
        """Clamp both bounds into the valid port space, then order them."""
        start, end = _clamp(start), _clamp(end)
        if end < start:
            start, end = end, start
        return cls(start=start, end=end)

    def ports(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1


class ScanRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: str
    start_port: int = Field(default_factory=lambda: settings.default_start_port)
    end_port: int = Field(default_factory=lambda: settings.default_end_port)
    timeout_ms: int = Field(default_factory=lambda: settings.default_timeout_ms, ge=0, le=MAX_TIMEOUT_MS)

    def port_range(self) -> PortRange:
        return PortRange.normalized(self.start_port, self.end_port)


class ScanSummary(BaseModel):
    target: str
    address: str
    port_range: PortRange
    timeout_ms: int
    found_any: bool = False
