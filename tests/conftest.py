"""Shared pytest fixtures for treesearch tests."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parents[1] / "src"))

from treesearch import Move, TreeEngine


# Grid constants for tests
GRID_SIZE = 10
GRID_START = (0, 0)
GRID_GOAL = (5, 5)


def make_grid_moves(size: int = GRID_SIZE, cost: int = 1):
    """LEFT/RIGHT/UP/DOWN on a size x size grid; no successor at the edges."""
    def left(s):
        return (s[0] - 1, s[1]) if s[0] > 0 else None

    def right(s):
        return (s[0] + 1, s[1]) if s[0] < size - 1 else None

    def up(s):
        return (s[0], s[1] - 1) if s[1] > 0 else None

    def down(s):
        return (s[0], s[1] + 1) if s[1] < size - 1 else None

    return [
        Move("LEFT", left, cost),
        Move("RIGHT", right, cost),
        Move("UP", up, cost),
        Move("DOWN", down, cost),
    ]


def manhattan_to(target):
    """Manhattan distance heuristic to a fixed target."""
    def h(s):
        return abs(s[0] - target[0]) + abs(s[1] - target[1])
    return h


@pytest.fixture
def grid_moves():
    """Four unit-cost moves on a 10x10 grid."""
    return make_grid_moves()


@pytest.fixture
def grid_engine(grid_moves):
    """Engine starting at (0, 0) on the 10x10 grid."""
    return TreeEngine(GRID_START, grid_moves)


@pytest.fixture
def grid_goal():
    """Goal predicate for (5, 5)."""
    return lambda s: s == GRID_GOAL


@pytest.fixture
def manhattan():
    """Manhattan distance to (5, 5)."""
    return manhattan_to(GRID_GOAL)


@pytest.fixture
def cycle_moves():
    """Moves over a 4-state ring 0 -> 1 -> 2 -> 3 -> 0 (and back)."""
    return [
        Move("NEXT", lambda s: (s + 1) % 4, 1),
        Move("PREV", lambda s: (s - 1) % 4, 1),
    ]
