"""
Tree search engine.

TreeEngine holds a start state and a list of moves, and finds a path to
any state satisfying a goal predicate with the selected algorithm.

Usage:
    from treesearch import TreeEngine, Move, Algorithm

    engine = TreeEngine((0, 0), [left, right, up, down])
    path = engine.search(lambda s: s == (5, 5), Algorithm.A_STAR, 1000, manhattan)

    for node in path:
        print(node.move, node.state, node.cost)

Node cost per algorithm (g = parent.path_cost + move.cost):
    DFS, BFS, IDS       -> 0 (fringe order ignores cost)
    UCS                 -> g
    GREEDY              -> h(state)
    A_STAR              -> g + h(state)

Duplicate detection keeps a set of every state generated during one
call (the start state included); a successor whose state is already in
the set is never pushed again. States must therefore provide equality
and a hash consistent with it.
"""

import logging
import math
import time
from typing import Callable, Generic, Iterable, Optional, Set, Tuple, TypeVar, Union

from ..algorithms import Algorithm
from ..config import EngineConfig
from ..errors import HeuristicArityError, UsageError
from ..sentry_config import report_exception
from ..types import Move, Node, Path
from .fringe import make_fringe
from .iddfs import IterativeDeepeningSearch
from .stats import SearchStats

logger = logging.getLogger(__name__)

S = TypeVar("S")

Goal = Callable[[S], bool]
Heuristic = Callable[[S], float]


def _zero_heuristic(state) -> int:
    return 0


class TreeEngine(Generic[S]):
    """
    Search engine over an implicit tree of states.

    The tree is defined by a start state and a list of moves; it is
    generated lazily during each search call. Calls are independent and
    share only the (unchanged) start state and move list.

    Not thread-safe: an instance must not be mutated or searched from
    several threads at once.
    """

    def __init__(
        self,
        start: S,
        moves: Iterable[Move[S]],
        config: Optional[EngineConfig] = None,
    ):
        """
        Initialize the engine.

        Args:
            start: Start state of the search problem.
            moves: Successor functions, tried in the given order.
            config: EngineConfig with defaults (A*, unbounded depth).
        """
        self.config = config or EngineConfig()
        self._root: Node[S] = Node.root(start)
        self._moves: Tuple[Move[S], ...] = self._check_moves(moves)
        self.last_stats: Optional[SearchStats] = None

    @staticmethod
    def _check_moves(moves: Iterable[Move[S]]) -> Tuple[Move[S], ...]:
        moves = tuple(moves)
        for move in moves:
            if not isinstance(move, Move):
                raise UsageError(f"Expected Move, got {type(move).__name__}")
        return moves

    # -------------------------------------------------------------------------
    # Start state and moves
    # -------------------------------------------------------------------------

    @property
    def start(self) -> S:
        """The start state."""
        return self._root.state

    def set_start(self, state: S) -> "TreeEngine[S]":
        """Reset the start state. Returns self for chaining."""
        self._root = Node.root(state)
        return self

    @property
    def moves(self) -> Tuple[Move[S], ...]:
        """The current move list."""
        return self._moves

    def set_moves(self, moves: Iterable[Move[S]]) -> "TreeEngine[S]":
        """Replace the whole move list. Returns self for chaining."""
        self._moves = self._check_moves(moves)
        return self

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(
        self,
        goal: Goal,
        algorithm: Union[Algorithm, str, None] = None,
        max_depth: Optional[int] = None,
        *heuristics: Heuristic,
        heuristic: Optional[Heuristic] = None,
    ) -> Path:
        """
        Find a path from the start state to a state satisfying goal.

        A heuristic can be passed positionally after max_depth, or as a
        keyword when algorithm and max_depth are left at their defaults:

            engine.search(goal, Algorithm.A_STAR, None, h)
            engine.search(goal, heuristic=h)    # A*, unbounded

        Args:
            goal: Predicate deciding whether a state is a solution.
            algorithm: Algorithm to run (config default, A*, when None).
            max_depth: Maximum number of moves in the path (config
                default, unbounded, when None).
            *heuristics: At most one heuristic estimating the remaining
                cost from a state. Ignored by uninformed algorithms.
            heuristic: Keyword form of the heuristic; counts towards the
                limit of one.

        Returns:
            Tuple of Nodes from root to goal, or an empty tuple if no
            solution exists within max_depth.

        Raises:
            UnknownAlgorithmError: If algorithm is not recognized.
            HeuristicArityError: If more than one heuristic is passed.
            UsageError: If max_depth, goal or heuristic is invalid.
        """
        if algorithm is None:
            algorithm = self.config.default_algorithm
        algorithm = Algorithm.parse(algorithm)

        if heuristic is not None:
            heuristics = heuristics + (heuristic,)
        if len(heuristics) > 1:
            raise HeuristicArityError(len(heuristics))
        heuristic = heuristics[0] if heuristics else _zero_heuristic

        if max_depth is None:
            max_depth = self.config.default_max_depth
        if max_depth is not None:
            if isinstance(max_depth, bool) or not isinstance(max_depth, int):
                raise UsageError(f"max_depth must be an int, got {type(max_depth).__name__}")
            if max_depth < 0:
                raise UsageError(f"max_depth cannot be negative ({max_depth})")

        if not callable(goal):
            raise UsageError("goal must be a callable predicate")
        if not callable(heuristic):
            raise UsageError("heuristic must be callable")
        if heuristics and not algorithm.informed:
            logger.debug(f"Heuristic ignored by uninformed algorithm {algorithm.name}")

        try:
            if algorithm is Algorithm.IDS:
                path, stats = self._iterative_deepening(goal, max_depth)
            else:
                path, stats = self._expand(goal, algorithm, max_depth, heuristic)
        except Exception as e:
            if self.config.report_errors:
                report_exception(e, algorithm=algorithm, max_depth=max_depth, start=self.start)
            raise

        self.last_stats = stats
        self._log(
            f"{algorithm.name} search {'found' if path else 'found no'} path"
            + (f" of depth {path[-1].depth}" if path else "")
            + f": {stats.nodes_expanded} expanded, {stats.nodes_generated} generated, "
            f"{stats.duplicates_skipped} duplicates, {stats.duration_seconds:.3f}s"
        )
        return path

    path_to = search

    def _log(self, message: str):
        if self.config.verbose:
            logger.info(message)
        else:
            logger.debug(message)

    def _iterative_deepening(self, goal: Goal, max_depth: Optional[int]) -> Tuple[Path, SearchStats]:
        def run_pass(limit: int) -> Tuple[Path, SearchStats]:
            return self._expand(goal, Algorithm.DFS, limit, _zero_heuristic)

        driver = IterativeDeepeningSearch(run_pass, max_depth=max_depth, verbose=self.config.verbose)
        path = driver.run()
        return path, driver.stats

    def _child_cost(
        self,
        algorithm: Algorithm,
        node: Node[S],
        move: Move[S],
        state: S,
        heuristic: Heuristic,
    ) -> float:
        g = node.path_cost + move.cost
        if algorithm is Algorithm.UCS:
            return g
        if algorithm is Algorithm.GREEDY:
            return heuristic(state)
        if algorithm is Algorithm.A_STAR:
            return g + heuristic(state)
        return 0

    def _expand(
        self,
        goal: Goal,
        algorithm: Algorithm,
        max_depth: Optional[int],
        heuristic: Heuristic,
    ) -> Tuple[Path, SearchStats]:
        """
        Run the expansion loop once with the fringe of the given algorithm.

        Pop -> goal test -> depth check -> generate unseen successors.
        """
        start_time = time.perf_counter()
        stats = SearchStats(algorithm=algorithm.name, max_depth=max_depth)
        limit = math.inf if max_depth is None else max_depth

        fringe = make_fringe(algorithm)
        seen: Set[S] = {self._root.state}
        fringe.push(self._root)
        stats.max_fringe_size = 1

        path: Path = ()
        while not fringe.is_empty():
            node = fringe.pop()

            if goal(node.state):
                path = node.path()
                stats.solution_depth = node.depth
                break
            if node.depth >= limit:
                stats.depth_cutoffs += 1
                continue

            stats.nodes_expanded += 1
            for move in self._moves:
                successor = move.apply(node.state)
                if successor is None:
                    stats.inapplicable_moves += 1
                    continue
                if successor in seen:
                    stats.duplicates_skipped += 1
                    continue
                seen.add(successor)

                cost = self._child_cost(algorithm, node, move, successor, heuristic)
                fringe.push(node.child(move, successor, cost))
                stats.nodes_generated += 1

            if len(fringe) > stats.max_fringe_size:
                stats.max_fringe_size = len(fringe)

        stats.duration_seconds = time.perf_counter() - start_time
        return path, stats


__all__ = ['TreeEngine', 'Goal', 'Heuristic']
