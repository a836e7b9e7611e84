"""
treesearch: Generic tree search over caller-defined state spaces.

A search problem is given by a start state, a list of moves (named,
costed successor functions), a goal predicate and, for informed
algorithms, a heuristic. TreeEngine solves it with depth-first,
breadth-first, uniform-cost, iterative-deepening, greedy or A* search.

Submodules:
    types      - Move, Node and Path
    algorithms - Algorithm selectors (uninformed / informed)
    state      - Optional State base class with structural equality
    search     - Fringe disciplines, iterative deepening and TreeEngine
    config     - EngineConfig defaults and environment loading

Usage:
    from treesearch import TreeEngine, Move, Algorithm

    right = Move("RIGHT", lambda s: (s[0] + 1, s[1]) if s[0] < 9 else None, 1)
    engine = TreeEngine((0, 0), [right])
    path = engine.search(lambda s: s == (5, 0), Algorithm.BFS)
"""

from .algorithms import Algorithm, UNINFORMED, INFORMED
from .config import EngineConfig
from .errors import UsageError, UnknownAlgorithmError, HeuristicArityError
from .state import State
from .types import Move, Node, Path
from .search import TreeEngine, SearchStats, DepthResult

__version__ = "0.1.0"

__all__ = [
    # Engine
    "TreeEngine",
    "EngineConfig",
    "SearchStats",
    "DepthResult",
    # Data model
    "Move",
    "Node",
    "Path",
    "State",
    # Algorithms
    "Algorithm",
    "UNINFORMED",
    "INFORMED",
    # Errors
    "UsageError",
    "UnknownAlgorithmError",
    "HeuristicArityError",
]
