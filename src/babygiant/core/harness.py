"""Coordinate providers: where the two framed hex strings come from.

The solver only ever sees a CoordinatePair. Running the Noir test
harness and scanning its free-form report stay behind this interface.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from babygiant.core.errors import HarnessError
from babygiant.utils.types import CoordinatePair

logger = logging.getLogger(__name__)

NARGO_COMMAND: tuple[str, ...] = ("nargo", "test", "--show-output")
X_KEY = "decrypted_x:"
Y_KEY = "decrypted_y:"


def extract_value(report: str, key: str) -> str:
    """Text after the first occurrence of key, up to end of line, stripped."""
    pos = report.find(key)
    if pos < 0:
        raise HarnessError(f"Key {key!r} not found in harness output")
    rest = report[pos + len(key):]
    value = rest.split("\n", 1)[0].strip()
    if not value:
        raise HarnessError(f"Value for key {key!r} is empty")
    return value


def parse_report(report: str, x_key: str = X_KEY, y_key: str = Y_KEY) -> CoordinatePair:
    """Pull the two coordinate strings out of a harness report."""
    return CoordinatePair(
        x=extract_value(report, x_key),
        y=extract_value(report, y_key),
    )


class CoordinateProvider(ABC):
    """Source of the (x, y) coordinate strings of the target point."""

    @abstractmethod
    def fetch(self) -> CoordinatePair:
        ...


class StaticCoordinateProvider(CoordinateProvider):
    """Coordinates known up front (command line, tests)."""

    def __init__(self, x: str, y: str) -> None:
        self.pair = CoordinatePair(x=x, y=y)

    def fetch(self) -> CoordinatePair:
        return self.pair


class NargoCoordinateProvider(CoordinateProvider):
    """Run ``nargo test --show-output`` and parse its report."""

    def __init__(
        self,
        project_dir: str | Path | None = None,
        command: tuple[str, ...] = NARGO_COMMAND,
    ) -> None:
        self.project_dir = Path(project_dir) if project_dir is not None else None
        self.command = command

    def run(self) -> str:
        """Execute the harness and return its stdout."""
        logger.info("Running harness: %s", " ".join(self.command))
        try:
            proc = subprocess.run(
                list(self.command),
                cwd=self.project_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise HarnessError(f"Could not execute {self.command[0]!r}: {exc}") from exc

        if proc.returncode != 0:
            raise HarnessError(
                f"Harness exited with status {proc.returncode}:\n{proc.stderr.strip()}"
            )
        if not proc.stdout.strip():
            raise HarnessError("Harness produced no output")
        logger.debug("Harness output:\n%s", proc.stdout)
        return proc.stdout

    def fetch(self) -> CoordinatePair:
        return parse_report(self.run())
