"""End-to-end: coordinate strings -> field elements -> point -> discrete log."""

from __future__ import annotations

import logging

from babygiant.core.bsgs import BSGSEngine
from babygiant.core.field import FieldDecoder
from babygiant.core.point_builder import PointBuilder
from babygiant.utils.types import CoordinatePair, SolverConfig

logger = logging.getLogger(__name__)


def compute_dlog(
    pair: CoordinatePair,
    config: SolverConfig | None = None,
) -> int | None:
    """Recover k with target = k * Base8 for the harness point ``pair``.

    Raises DecodeError or InvalidPointError on bad input; returns None
    when no k below 2^config.bit_width exists.
    """
    config = config or SolverConfig()
    decoder = FieldDecoder(byteorder=config.byteorder)
    x = decoder.decode(pair.x)
    y = decoder.decode(pair.y)

    builder = PointBuilder(validate=config.validate_points)
    target = builder.build(x, y)
    generator = builder.generator()
    logger.debug("Target point in solver model: (%d, %d)", *target)

    engine = BSGSEngine(config, curve=builder.curve)
    return engine.solve(config.bit_width, generator, target)
