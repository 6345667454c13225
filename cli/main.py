import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from core.config import settings
from core.errors import InputError, ScanError
from core.models import ScanRequest
from pipeline.orchestrator import Orchestrator

log = logging.getLogger(__name__)

Ask = Callable[[str], str]


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise InputError(f"Invalid input: {message}")


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(description="Sequential TCP connect scanner (prompts when no target is given)")
    p.add_argument("target", nargs="?", help="IPv4 address or hostname")
    p.add_argument("start_port", nargs="?", help=f"first port (default: {settings.default_start_port})")
    p.add_argument("end_port", nargs="?", help=f"last port (default: {settings.default_end_port})")
    p.add_argument("timeout_ms", nargs="?", help=f"per-port timeout in ms (default: {settings.default_timeout_ms})")
    return p


def _ask(ask: Ask, prompt: str) -> str:
    try:
        return ask(prompt)
    except EOFError:
        return ""


def _prompt_fields(ask: Ask) -> dict:
    target = _ask(ask, "Enter target IP or hostname: ")
    if not target:
        raise InputError("No target provided. Exiting.")
    fields = {"target": target}
    for name, label, default in (
        ("start_port", "Start port", settings.default_start_port),
        ("end_port", "End port", settings.default_end_port),
        ("timeout_ms", "Timeout ms", settings.default_timeout_ms),
    ):
        answer = _ask(ask, f"{label} (default {default}): ").strip()
        if answer:
            fields[name] = answer
    return fields


def _validation_detail(exc: ValidationError) -> str:
    err = exc.errors()[0]
    where = ".".join(str(part) for part in err["loc"])
    return f"Invalid input: {where}: {err['msg']}"


def gather_request(argv: Optional[List[str]] = None, ask: Ask = input) -> ScanRequest:
    args = build_parser().parse_args(argv)
    if args.target is None:
        fields = _prompt_fields(ask)
    else:
        fields = {
            name: value
            for name, value in vars(args).items()
            if value is not None
        }
    try:
        return ScanRequest(**fields)
    except ValidationError as exc:
        raise InputError(_validation_detail(exc)) from exc


def main(argv: Optional[List[str]] = None, ask: Ask = input) -> int:
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        request = gather_request(argv, ask=ask)
        log.debug("request %s", request)
        Orchestrator().scan(request)
    except ScanError as exc:
        print(str(exc), file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
