"""
Counters collected during one search call.

TreeEngine.last_stats holds the SearchStats of the most recent call.
For iterative deepening, one DepthResult is recorded per depth limit and
the counters are summed over all passes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DepthResult:
    """
    Results from one depth-limited pass of iterative deepening.

    Attributes:
        depth: The depth limit used.
        found: Whether this pass reached a goal.
        nodes_expanded: Nodes expanded in this pass.
        nodes_generated: Child nodes pushed in this pass.
        depth_cutoffs: Nodes left unexpanded because of the limit.
        duration_seconds: Time spent on this pass.
    """
    depth: int
    found: bool
    nodes_expanded: int
    nodes_generated: int
    depth_cutoffs: int
    duration_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "depth": self.depth,
            "found": self.found,
            "nodes_expanded": self.nodes_expanded,
            "nodes_generated": self.nodes_generated,
            "depth_cutoffs": self.depth_cutoffs,
            "duration_seconds": self.duration_seconds,
        }


@dataclass
class SearchStats:
    """
    Statistics of a single search call.

    Attributes:
        algorithm: Name of the algorithm run.
        max_depth: Depth bound (None = unbounded).
        nodes_expanded: Nodes whose successors were generated.
        nodes_generated: Child nodes created and pushed to the fringe.
        duplicates_skipped: Successors dropped because their state was seen.
        inapplicable_moves: Move applications that returned no successor.
        depth_cutoffs: Nodes popped at the depth bound and not expanded.
        max_fringe_size: Largest fringe size observed.
        solution_depth: Depth of the goal node (None if not found).
        duration_seconds: Wall time of the call.
        depth_results: Per-depth passes (iterative deepening only).
    """
    algorithm: str
    max_depth: Optional[int]
    nodes_expanded: int = 0
    nodes_generated: int = 0
    duplicates_skipped: int = 0
    inapplicable_moves: int = 0
    depth_cutoffs: int = 0
    max_fringe_size: int = 0
    solution_depth: Optional[int] = None
    duration_seconds: float = 0.0
    depth_results: List[DepthResult] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.solution_depth is not None

    def merge(self, other: "SearchStats") -> None:
        """Add the counters of another pass into this one."""
        self.nodes_expanded += other.nodes_expanded
        self.nodes_generated += other.nodes_generated
        self.duplicates_skipped += other.duplicates_skipped
        self.inapplicable_moves += other.inapplicable_moves
        self.depth_cutoffs += other.depth_cutoffs
        self.max_fringe_size = max(self.max_fringe_size, other.max_fringe_size)
        if other.solution_depth is not None:
            self.solution_depth = other.solution_depth

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging or JSON serialization."""
        return {
            "algorithm": self.algorithm,
            "max_depth": self.max_depth,
            "found": self.found,
            "nodes_expanded": self.nodes_expanded,
            "nodes_generated": self.nodes_generated,
            "duplicates_skipped": self.duplicates_skipped,
            "inapplicable_moves": self.inapplicable_moves,
            "depth_cutoffs": self.depth_cutoffs,
            "max_fringe_size": self.max_fringe_size,
            "solution_depth": self.solution_depth,
            "duration_seconds": self.duration_seconds,
            "depth_results": [d.to_dict() for d in self.depth_results],
        }


__all__ = ['DepthResult', 'SearchStats']
