"""
Shared fixtures for the line rasterization tests.

Provides segments for the reference scenarios and fresh display /
coordinator / session objects.
"""
import os
import sys

import pytest

# Ensure the repository root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from coordinator import CalculatorSession, Coordinator
from models.segment import Segment
from visualization.display import ResultsDisplay


# ── Reference segments ──────────────────────────────────────────────────

@pytest.fixture
def diagonal():
    """(0,0)→(4,4)"""
    return Segment(0, 0, 4, 4)


@pytest.fixture
def shallow():
    """(0,0)→(4,2): y increment 0.5, exercises the rounding tie rule"""
    return Segment(0, 0, 4, 2)


@pytest.fixture
def vertical():
    """(2,3)→(2,8)"""
    return Segment(2, 3, 2, 8)


@pytest.fixture
def backwards():
    """(5,5)→(1,1)"""
    return Segment(5, 5, 1, 1)


# ── Collaborators ───────────────────────────────────────────────────────

@pytest.fixture
def display():
    return ResultsDisplay()


@pytest.fixture
def coordinator(display):
    return Coordinator(display)


@pytest.fixture
def session(coordinator):
    return CalculatorSession(coordinator)
