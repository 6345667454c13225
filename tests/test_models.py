import pytest
from pydantic import ValidationError

from core.models import PortRange, ScanRequest


def test_reversed_range_is_swapped():
    r = PortRange.normalized(50, 10)
    assert (r.start, r.end) == (10, 50)


def test_start_below_one_clamps_to_one():
    assert PortRange.normalized(-5, 10).start == 1
    assert PortRange.normalized(0, 10).start == 1


def test_end_above_max_clamps_to_65535():
    assert PortRange.normalized(1, 999999).end == 65535


def test_out_of_space_start_still_lands_in_range():
    r = PortRange.normalized(70000, 100)
    assert (r.start, r.end) == (100, 65535)


def test_ports_are_ascending_and_inclusive():
    r = PortRange.normalized(20, 25)
    assert list(r.ports()) == [20, 21, 22, 23, 24, 25]
    assert len(r) == 6


def test_request_defaults():
    req = ScanRequest(target="127.0.0.1")
    assert (req.start_port, req.end_port, req.timeout_ms) == (1, 100, 300)


def test_request_coerces_numeric_strings():
    req = ScanRequest(target="h", start_port="20", end_port="30", timeout_ms="50")
    assert (req.start_port, req.end_port, req.timeout_ms) == (20, 30, 50)
    assert req.port_range() == PortRange(start=20, end=30)


def test_request_rejects_garbage_and_negative_timeout():
    with pytest.raises(ValidationError):
        ScanRequest(target="h", start_port="abc")
    with pytest.raises(ValidationError):
        ScanRequest(target="h", timeout_ms=-1)


def test_request_rejects_timeout_past_select_limit():
    with pytest.raises(ValidationError):
        ScanRequest(target="h", timeout_ms=2**31)
