"""Shared fixtures for the solver tests."""

import pytest

from babygiant.core.curve import solver_curve
from babygiant.core.point_builder import PointBuilder


@pytest.fixture
def curve():
    return solver_curve()


@pytest.fixture
def builder():
    return PointBuilder()


@pytest.fixture
def generator(builder):
    return builder.generator()
