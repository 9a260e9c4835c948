"""Parallel baby-step/giant-step search for bounded discrete logarithms.

Solves B = k*A for 0 <= k < 2^N with m = 2^(N/2):

    k = i*m + j,  0 <= i, j < m
    B - i*(m*A) = j*A

Baby steps j*A are split into T contiguous chunks, one per worker
process, each holding a private table. Every worker then scans the full
giant-step range against its own table, so total giant work is T*m and
no table is ever shared. The first worker to hit posts its answer; the
collector then sets a stop event that the others poll, and joins them
all before returning.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import os
import queue
import traceback
from typing import TYPE_CHECKING

from babygiant.core.curve import TwistedEdwardsCurve, solver_curve
from babygiant.core.errors import InvalidPointError, SearchError
from babygiant.utils.constants import MAX_BIT_WIDTH
from babygiant.utils.types import AffinePoint, ChunkReport, SolverConfig

if TYPE_CHECKING:
    from multiprocessing.synchronize import Event

logger = logging.getLogger(__name__)

_POLL_SECONDS = 0.5


class SearchCancelled(Exception):
    """Raised inside a worker when the stop event is observed."""


def partition_chunks(m: int, workers: int) -> list[tuple[int, int]]:
    """Split [0, m) into ``workers`` contiguous [start, end) chunks.

    All chunks have size m // workers except the last, which absorbs the
    remainder.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if m < 1:
        raise ValueError(f"m must be >= 1, got {m}")
    size = m // workers
    starts = [idx * size for idx in range(workers)]
    ends = starts[1:] + [m]
    return list(zip(starts, ends))


def _drain(results: mp.Queue) -> None:
    while True:
        try:
            results.get_nowait()
        except queue.Empty:
            return


def _check_stop(stop: Event | None, step: int, interval: int) -> None:
    if stop is not None and step % interval == 0 and stop.is_set():
        raise SearchCancelled


def build_baby_table(
    curve: TwistedEdwardsCurve,
    generator: AffinePoint,
    start: int,
    end: int,
    stop: Event | None = None,
    check_interval: int = 1024,
) -> dict[AffinePoint, int]:
    """Map j*A -> j for j in [start, end), one addition per step."""
    step = curve.to_extended(generator)
    v = curve.multiply_extended(step, start)
    table: dict[AffinePoint, int] = {}
    for j in range(start, end):
        _check_stop(stop, j - start, check_interval)
        table[curve.to_affine(v)] = j
        v = curve.add_extended(v, step)
    return table


def giant_step_scan(
    curve: TwistedEdwardsCurve,
    generator: AffinePoint,
    target: AffinePoint,
    table: dict[AffinePoint, int],
    m: int,
    stop: Event | None = None,
    check_interval: int = 1024,
) -> int | None:
    """Walk gamma = B - i*(m*A) for i in [0, m) and look each up in table."""
    am = curve.multiply_extended(curve.to_extended(generator), m)
    gamma = curve.to_extended(target)
    for i in range(m):
        _check_stop(stop, i, check_interval)
        j = table.get(curve.to_affine(gamma))
        if j is not None:
            return i * m + j
        gamma = curve.sub_extended(gamma, am)
    return None


def search_chunk(
    curve: TwistedEdwardsCurve,
    generator: AffinePoint,
    target: AffinePoint,
    m: int,
    start: int,
    end: int,
    stop: Event | None = None,
    check_interval: int = 1024,
) -> int | None:
    """Baby steps over [start, end), then a full giant-step scan."""
    table = build_baby_table(curve, generator, start, end, stop, check_interval)
    return giant_step_scan(curve, generator, target, table, m, stop, check_interval)


def _worker(
    index: int,
    curve: TwistedEdwardsCurve,
    generator: AffinePoint,
    target: AffinePoint,
    m: int,
    start: int,
    end: int,
    stop: Event,
    results: mp.Queue,
    check_interval: int,
) -> None:
    """Process entry point: always posts exactly one ChunkReport."""
    report = ChunkReport(index=index, start=start, end=end)
    try:
        report.result = search_chunk(
            curve, generator, target, m, start, end, stop, check_interval,
        )
    except SearchCancelled:
        pass
    except Exception:
        report.error = traceback.format_exc()
    results.put(report)


class BSGSEngine:
    """Bounded discrete-log solver over a twisted Edwards curve.

    Usage::

        engine = BSGSEngine(SolverConfig(bit_width=40))
        k = engine.solve(40, A, B)   # int, or None if k >= 2^40
    """

    def __init__(
        self,
        config: SolverConfig | None = None,
        curve: TwistedEdwardsCurve | None = None,
    ) -> None:
        self.config = config or SolverConfig()
        self.curve = curve or solver_curve()

    def worker_count(self, m: int) -> int:
        workers = self.config.workers
        if workers is None:
            workers = os.cpu_count() or 1
        elif workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        return min(workers, m)

    def _validate(
        self, bit_width: int, generator: AffinePoint, target: AffinePoint,
    ) -> None:
        if bit_width < 2 or bit_width > MAX_BIT_WIDTH or bit_width % 2:
            raise ValueError(
                f"bit_width must be even and in [2, {MAX_BIT_WIDTH}], got {bit_width}"
            )
        order = self.curve.order
        if order is not None and (1 << bit_width) > order:
            raise ValueError(
                f"2^{bit_width} exceeds the subgroup order of the curve"
            )
        if not self.curve.is_on_curve(generator):
            raise InvalidPointError(f"Generator {generator} is not on the curve")
        if generator == self.curve.identity:
            raise InvalidPointError("Generator is the neutral element")
        if self.config.validate_points and not self.curve.is_on_curve(target):
            raise InvalidPointError(f"Target {target} is not on the curve")

    def solve(
        self,
        bit_width: int,
        generator: AffinePoint,
        target: AffinePoint,
    ) -> int | None:
        """Find k in [0, 2^bit_width) with target = k*generator, else None."""
        self._validate(bit_width, generator, target)

        m = 1 << (bit_width // 2)
        workers = self.worker_count(m)
        chunks = partition_chunks(m, workers)
        interval = max(1, self.config.cancel_check_interval)
        logger.info(
            "Starting baby-step giant-step search: bit_width=%d, m=%d, workers=%d",
            bit_width, m, workers,
        )

        ctx = mp.get_context()
        results = ctx.Queue()
        stop = ctx.Event()
        procs = []
        for idx, (start, end) in enumerate(chunks):
            logger.debug("Worker %d: baby steps [%d, %d)", idx + 1, start, end)
            procs.append(ctx.Process(
                target=_worker,
                args=(idx, self.curve, generator, target, m, start, end,
                      stop, results, interval),
                daemon=True,
            ))

        result: int | None = None
        failure: str | None = None
        started = []
        try:
            for proc in procs:
                proc.start()
                started.append(proc)
            pending = len(procs)
            while pending:
                try:
                    report = results.get(timeout=_POLL_SECONDS)
                except queue.Empty:
                    if any(proc.is_alive() for proc in started):
                        continue
                    try:
                        report = results.get(timeout=_POLL_SECONDS)
                    except queue.Empty:
                        failure = f"{pending} worker(s) exited without reporting"
                        break
                pending -= 1
                if report.error is not None:
                    failure = (
                        f"Worker {report.index + 1} failed on chunk "
                        f"[{report.start}, {report.end}):\n{report.error}"
                    )
                    break
                if report.result is not None:
                    result = report.result
                    logger.debug(
                        "Worker %d hit in chunk [%d, %d)",
                        report.index + 1, report.start, report.end,
                    )
                    break
        finally:
            stop.set()
            for proc in started:
                # Unread reports must leave the pipe before a worker can exit
                proc.join(_POLL_SECONDS)
                while proc.exitcode is None:
                    _drain(results)
                    proc.join(_POLL_SECONDS)
            results.close()

        if failure is not None:
            raise SearchError(failure)

        if result is None:
            logger.info("No discrete logarithm below 2^%d", bit_width)
        else:
            logger.info("Discrete logarithm found: %d", result)
        return result
