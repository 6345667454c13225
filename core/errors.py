"""
Fatal errors of a scan run. Each carries the process exit status the CLI
reports; probe-level failures are never raised, they just mean "not open".
"""


class ScanError(ValueError):
    exit_code = 1


class InputError(ScanError):
    exit_code = 1


class ResolutionError(ScanError):
    exit_code = 2

    def __init__(self, target: str):
        super().__init__(f"Cannot resolve target: {target}")
        self.target = target
