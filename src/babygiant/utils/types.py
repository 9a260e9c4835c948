"""Dataclass definitions for the discrete-log solver."""

from __future__ import annotations

from dataclasses import dataclass

from babygiant.utils.constants import (
    CANCEL_CHECK_INTERVAL,
    DEFAULT_BIT_WIDTH,
    HARNESS_BYTE_ORDER,
)

AffinePoint = tuple[int, int]


@dataclass
class SolverConfig:
    """Configuration for a discrete-log search."""

    bit_width: int = DEFAULT_BIT_WIDTH
    workers: int | None = None  # None -> os.cpu_count()
    cancel_check_interval: int = CANCEL_CHECK_INTERVAL
    validate_points: bool = True  # False skips the target on-curve check
    byteorder: str = HARNESS_BYTE_ORDER  # of the coordinate hex strings
    debug: bool = False


@dataclass(frozen=True)
class CoordinatePair:
    """The two framed hex coordinate strings produced by the harness."""

    x: str
    y: str


@dataclass
class ChunkReport:
    """The single message a search worker posts when it stops."""

    index: int
    start: int
    end: int
    result: int | None = None
    error: str | None = None  # formatted traceback if the worker raised
