"""Integration tests: coordinate strings -> discrete log, end to end."""

import numpy as np
import pytest

from babygiant import compute_dlog
from babygiant.core.errors import DecodeError, InvalidPointError
from babygiant.core.field import FieldDecoder
from babygiant.core.harness import StaticCoordinateProvider
from babygiant.utils.constants import HARNESS_BYTE_ORDER
from babygiant.utils.types import CoordinatePair, SolverConfig

REFERENCE_X = "0xcad3cd30e863eb0e2ed2ef543b5a7fe4f26a06dfb08828542cdf2487237bf500"
REFERENCE_Y = "0x123b986383d08a0ca623bf8c59288032c8ce8054ebc415a53114bec295047a0a"
REFERENCE_K = 2**32 - 1


def harness_pair(builder, curve, generator, k: int) -> CoordinatePair:
    """Framed harness coordinates of k * Base8, in the harness byte order."""
    x, y = builder.unbuild(curve.multiply(generator, k))
    decoder = FieldDecoder(byteorder=HARNESS_BYTE_ORDER)
    return CoordinatePair(x=decoder.encode(x), y=decoder.encode(y))


class TestReferencePoint:
    def test_decodes_to_known_multiple(self, builder, curve, generator):
        decoder = FieldDecoder(byteorder=HARNESS_BYTE_ORDER)
        target = builder.build(decoder.decode(REFERENCE_X), decoder.decode(REFERENCE_Y))
        assert target == curve.multiply(generator, REFERENCE_K)

    def test_harness_encoding_matches_reference(self, builder, curve, generator):
        pair = harness_pair(builder, curve, generator, REFERENCE_K)
        assert pair == CoordinatePair(x=REFERENCE_X, y=REFERENCE_Y)

    def test_big_endian_reading_is_off_curve(self, builder):
        decoder = FieldDecoder(byteorder="big")
        with pytest.raises(InvalidPointError):
            builder.build(decoder.decode(REFERENCE_X), decoder.decode(REFERENCE_Y))

    def test_found_within_reduced_bound(self):
        # 2^32 - 1 is the largest k below a 32-bit bound
        pair = CoordinatePair(x=REFERENCE_X, y=REFERENCE_Y)
        assert compute_dlog(pair, SolverConfig(bit_width=32)) == REFERENCE_K


class TestPipeline:
    def test_recovers_scalar(self, builder, curve, generator):
        config = SolverConfig(bit_width=16, workers=2)
        rng = np.random.default_rng(3)
        for k in rng.integers(0, 2**16, size=2):
            pair = harness_pair(builder, curve, generator, int(k))
            assert compute_dlog(pair, config) == int(k)

    def test_big_endian_short_digit_strings(self, builder, curve, generator):
        x, y = builder.unbuild(curve.multiply(generator, 42))
        pair = CoordinatePair(x=f"0x{x:x}", y=f"0x{y:x}")
        config = SolverConfig(bit_width=8, workers=2, byteorder="big")
        assert compute_dlog(pair, config) == 42

    def test_not_found_is_none(self, builder, curve, generator):
        pair = harness_pair(builder, curve, generator, 2**8 + 3)
        assert compute_dlog(pair, SolverConfig(bit_width=8, workers=2)) is None

    def test_zero_plaintext(self, builder, curve, generator):
        pair = harness_pair(builder, curve, generator, 0)
        assert compute_dlog(pair, SolverConfig(bit_width=8, workers=2)) == 0

    def test_provider_feeds_pipeline(self, builder, curve, generator):
        pair = harness_pair(builder, curve, generator, 1000)
        provider = StaticCoordinateProvider(pair.x, pair.y)
        assert compute_dlog(provider.fetch(), SolverConfig(bit_width=10, workers=2)) == 1000


class TestPipelineErrors:
    def test_unframed_input(self):
        pair = CoordinatePair(x=REFERENCE_X[2:], y=REFERENCE_Y)
        with pytest.raises(DecodeError):
            compute_dlog(pair, SolverConfig(bit_width=8, workers=1))

    def test_off_curve_input(self):
        pair = CoordinatePair(x="0x1", y="0x1")
        with pytest.raises(InvalidPointError):
            compute_dlog(pair, SolverConfig(bit_width=8, workers=1))

    def test_off_curve_input_unvalidated(self):
        # (0, 2) is off the curve; unchecked, the search runs and misses
        pair = CoordinatePair(x="0x0", y="0x2")
        config = SolverConfig(bit_width=4, workers=1, validate_points=False, byteorder="big")
        assert compute_dlog(pair, config) is None


@pytest.mark.slow
class TestReferenceScenario:
    def test_forty_bit_search(self):
        pair = CoordinatePair(x=REFERENCE_X, y=REFERENCE_Y)
        assert compute_dlog(pair, SolverConfig(bit_width=40)) == REFERENCE_K
