"""
Iterative deepening driver.

Runs depth-limited depth-first passes at increasing limits and returns
the first path found, so the shallowest solution depth is reached while
memory stays bounded by the current limit.

Usage:
    search = IterativeDeepeningSearch(run_pass, max_depth=20)
    path = search.run()
    print(search.stats.depth_results)

Architecture:
    For depth 1, 2, 3, ... max_depth:
        1. Run a fresh depth-limited DFS pass (new fringe, new seen-set)
        2. Record a DepthResult for the pass
        3. Stop on the first non-empty path
        4. Stop early if the pass hit no depth cutoff: the whole reachable
           space was explored, so deeper limits cannot find anything new

    Nothing carries over between passes; each limit re-explores the tree
    from the root.
"""

import itertools
import logging
import time
from typing import Callable, Optional, Tuple

from ..algorithms import Algorithm
from ..types import Path
from .stats import DepthResult, SearchStats

logger = logging.getLogger(__name__)

# A pass takes a depth limit and returns (path, stats) for that limit.
PassRunner = Callable[[int], Tuple[Path, SearchStats]]


class IterativeDeepeningSearch:
    """
    Repeated depth-limited search with increasing limits.

    The pass runner is called once per limit and must be independent of
    previous calls.
    """

    def __init__(
        self,
        run_pass: PassRunner,
        max_depth: Optional[int] = None,
        verbose: bool = False,
    ):
        """
        Initialize iterative deepening search.

        Args:
            run_pass: Callable running one depth-limited DFS pass.
            max_depth: Largest limit to try, inclusive (None = unbounded).
            verbose: Log per-depth progress at INFO.
        """
        self.run_pass = run_pass
        self.max_depth = max_depth
        self.verbose = verbose
        self.stats = SearchStats(algorithm=Algorithm.IDS.name, max_depth=max_depth)
        self.stopped_reason = "not_started"

    def _log(self, message: str):
        if self.verbose:
            logger.info(message)
        else:
            logger.debug(message)

    def run(self) -> Path:
        """
        Run iterative deepening search.

        Returns:
            The first non-empty path found, or an empty tuple.
        """
        start_time = time.perf_counter()
        self.stopped_reason = "max_depth_reached"
        path: Path = ()

        if self.max_depth is None:
            limits = itertools.count(1)
        else:
            limits = range(1, self.max_depth + 1)

        for depth in limits:
            self._log(f"Searching depth {depth}...")
            depth_start = time.perf_counter()

            path, pass_stats = self.run_pass(depth)

            depth_duration = time.perf_counter() - depth_start
            self.stats.merge(pass_stats)
            self.stats.depth_results.append(DepthResult(
                depth=depth,
                found=bool(path),
                nodes_expanded=pass_stats.nodes_expanded,
                nodes_generated=pass_stats.nodes_generated,
                depth_cutoffs=pass_stats.depth_cutoffs,
                duration_seconds=depth_duration,
            ))

            self._log(
                f"  Depth {depth}: {pass_stats.nodes_expanded} expanded, "
                f"{pass_stats.depth_cutoffs} cutoffs, {depth_duration:.3f}s"
            )

            if path:
                self.stopped_reason = "goal_found"
                break
            if pass_stats.depth_cutoffs == 0:
                self.stopped_reason = "space_exhausted"
                break

        self.stats.duration_seconds = time.perf_counter() - start_time
        self._log(f"  Stopping: {self.stopped_reason}")
        return path


__all__ = ['IterativeDeepeningSearch', 'PassRunner']
