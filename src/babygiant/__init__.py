"""Bounded parallel discrete-log solver on Baby Jubjub."""

__version__ = "0.1.0"

from babygiant.core.bsgs import BSGSEngine
from babygiant.core.errors import (
    BabyGiantError,
    DecodeError,
    HarnessError,
    InvalidPointError,
    SearchError,
)
from babygiant.core.field import FieldDecoder, decode_field_element
from babygiant.core.pipeline import compute_dlog
from babygiant.core.point_builder import PointBuilder
from babygiant.utils.types import CoordinatePair, SolverConfig

__all__ = [
    "BSGSEngine",
    "BabyGiantError",
    "CoordinatePair",
    "DecodeError",
    "FieldDecoder",
    "HarnessError",
    "InvalidPointError",
    "PointBuilder",
    "SearchError",
    "SolverConfig",
    "compute_dlog",
    "decode_field_element",
]
