"""
Search machinery.

This module provides:
- Fringe disciplines and their factory (fringe.py)
- Per-call statistics (stats.py)
- Iterative deepening driver (iddfs.py)
- The TreeEngine expansion loop (engine.py)
"""

from .fringe import (
    Fringe,
    StackFringe,
    QueueFringe,
    PriorityFringe,
    make_fringe,
)

from .stats import (
    DepthResult,
    SearchStats,
)

from .iddfs import IterativeDeepeningSearch

from .engine import TreeEngine

__all__ = [
    # Fringe
    'Fringe',
    'StackFringe',
    'QueueFringe',
    'PriorityFringe',
    'make_fringe',
    # Stats
    'DepthResult',
    'SearchStats',
    # IDDFS
    'IterativeDeepeningSearch',
    # Engine
    'TreeEngine',
]
