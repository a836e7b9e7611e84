"""
Property-based tests for TreeEngine.

Uses Hypothesis to generate random graphs and trees and verify invariants:
1. Termination - every algorithm finishes on cyclic graphs
2. Validity - returned paths follow the moves from the start state
3. Depth bound - no path has more moves than max_depth
4. Determinism - same problem produces the same path
5. Completeness - all algorithms agree on whether a goal is reachable
6. Shallowest - on trees, IDS and BFS return a goal of minimal depth
"""

from typing import List, Tuple

import pytest
from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st

pytest.importorskip("hypothesis")

from treesearch import Algorithm, Move, TreeEngine


# =============================================================================
# PROBLEM BUILDERS
# =============================================================================

def graph_moves(edges: List[Tuple[int, int, int]]) -> List[Move]:
    """One move per edge, applicable only at its source state."""
    moves = []
    for i, (src, dst, cost) in enumerate(edges):
        moves.append(Move(f"E{i}", lambda s, a=src, b=dst: b if s == a else None, cost))
    return moves


def tree_moves(branching: int) -> List[Move]:
    """Append one choice to a tuple state; every state is a distinct node."""
    return [Move(f"C{c}", lambda s, c=c: s + (c,), 1) for c in range(branching)]


def check_path(path, start, moves_by_name):
    """Assert the path starts at start and each node follows from its parent."""
    assert path[0].state == start
    assert path[0].is_root
    for parent, node in zip(path, path[1:]):
        assert node.parent is parent
        assert node.depth == parent.depth + 1
        assert moves_by_name[node.move.name].apply(parent.state) == node.state


# =============================================================================
# HYPOTHESIS STRATEGIES
# =============================================================================

@st.composite
def random_graph(draw, max_states: int = 8):
    """
    Generate a small weighted directed graph over states 0..n-1.

    Returns:
        (n, edges, target, heuristic values).
    """
    n = draw(st.integers(min_value=1, max_value=max_states))
    node = st.integers(min_value=0, max_value=n - 1)
    edges = draw(st.lists(
        st.tuples(node, node, st.integers(min_value=0, max_value=5)),
        max_size=n * 3,
    ))
    target = draw(node)
    h = draw(st.lists(st.integers(min_value=0, max_value=10), min_size=n, max_size=n))
    return n, edges, target, h


@st.composite
def random_tree_goals(draw):
    """Generate a branching factor and a non-empty set of goal tuples."""
    branching = draw(st.integers(min_value=1, max_value=3))
    goal = st.lists(st.integers(min_value=0, max_value=branching - 1), max_size=4).map(tuple)
    goals = draw(st.sets(goal, min_size=1, max_size=4))
    return branching, goals


# =============================================================================
# PROPERTY TESTS
# =============================================================================

class TestGraphProperties:
    """Invariants on random cyclic graphs."""

    @given(problem=random_graph(), algorithm=st.sampled_from(list(Algorithm)))
    @settings(max_examples=100, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    def test_terminates_and_path_valid(self, problem, algorithm):
        """Search ends and any path returned is a valid move sequence."""
        n, edges, target, h = problem
        moves = graph_moves(edges)
        engine = TreeEngine(0, moves)
        path = engine.search(lambda s: s == target, algorithm, None, lambda s: h[s])
        if path:
            assert path[-1].state == target
            check_path(path, 0, {m.name: m for m in moves})

    @given(problem=random_graph(), algorithm=st.sampled_from(list(Algorithm)))
    @settings(max_examples=100, deadline=None)
    def test_completeness_agrees_with_bfs(self, problem, algorithm):
        """Every algorithm finds a path exactly when BFS does."""
        n, edges, target, h = problem
        engine = TreeEngine(0, graph_moves(edges))
        goal = lambda s: s == target
        reference = engine.search(goal, Algorithm.BFS)
        path = engine.search(goal, algorithm, None, lambda s: h[s])
        assert bool(path) == bool(reference)

    @given(
        problem=random_graph(),
        algorithm=st.sampled_from(list(Algorithm)),
        max_depth=st.integers(min_value=0, max_value=4),
    )
    @settings(max_examples=100, deadline=None)
    def test_depth_bound(self, problem, algorithm, max_depth):
        """No returned path has more than max_depth moves."""
        n, edges, target, h = problem
        engine = TreeEngine(0, graph_moves(edges))
        path = engine.search(lambda s: s == target, algorithm, max_depth, lambda s: h[s])
        assert len(path) <= max_depth + 1

    @given(problem=random_graph(), algorithm=st.sampled_from(list(Algorithm)))
    @settings(max_examples=50, deadline=None)
    def test_deterministic(self, problem, algorithm):
        """Two runs on the same problem return the same move sequence."""
        n, edges, target, h = problem
        engine = TreeEngine(0, graph_moves(edges))
        goal = lambda s: s == target
        first = engine.search(goal, algorithm, None, lambda s: h[s])
        second = engine.search(goal, algorithm, None, lambda s: h[s])
        assert [(x.state, x.cost) for x in first] == [(y.state, y.cost) for y in second]

    @given(problem=random_graph())
    @settings(max_examples=100, deadline=None)
    def test_expanded_at_most_once(self, problem):
        """With an unreachable goal each reachable state is expanded once."""
        n, edges, target, h = problem
        engine = TreeEngine(0, graph_moves(edges))
        for algorithm in (Algorithm.BFS, Algorithm.DFS, Algorithm.UCS):
            engine.search(lambda s: False, algorithm)
            stats = engine.last_stats
            assert stats.nodes_expanded <= n
            assert stats.nodes_generated == stats.nodes_expanded - 1


class TestTreeProperties:
    """Invariants on trees, where no two paths reach the same state."""

    @given(problem=random_tree_goals())
    @settings(max_examples=100, deadline=None)
    def test_ids_finds_shallowest(self, problem):
        """IDS returns a goal at minimal depth."""
        branching, goals = problem
        engine = TreeEngine((), tree_moves(branching))
        path = engine.search(lambda s: s in goals, Algorithm.IDS, 4)
        assert path[-1].state in goals
        assert path[-1].depth == min(len(g) for g in goals)

    @given(problem=random_tree_goals())
    @settings(max_examples=100, deadline=None)
    def test_bfs_matches_ids_depth(self, problem):
        """BFS and IDS find goals at the same depth."""
        branching, goals = problem
        engine = TreeEngine((), tree_moves(branching))
        goal = lambda s: s in goals
        bfs = engine.search(goal, Algorithm.BFS, 4)
        ids = engine.search(goal, Algorithm.IDS, 4)
        assert len(bfs) == len(ids)

    @given(problem=random_tree_goals())
    @settings(max_examples=100, deadline=None)
    def test_ids_no_longer_than_dfs(self, problem):
        """IDS never returns a longer path than depth-limited DFS."""
        branching, goals = problem
        engine = TreeEngine((), tree_moves(branching))
        goal = lambda s: s in goals
        dfs = engine.search(goal, Algorithm.DFS, 4)
        ids = engine.search(goal, Algorithm.IDS, 4)
        assert dfs
        assert len(ids) <= len(dfs)

    @given(problem=random_tree_goals())
    @settings(max_examples=50, deadline=None)
    def test_ucs_cost_matches_depth(self, problem):
        """With unit costs UCS finds a goal at minimal depth."""
        branching, goals = problem
        engine = TreeEngine((), tree_moves(branching))
        path = engine.search(lambda s: s in goals, Algorithm.UCS, 4)
        assert path[-1].path_cost == min(len(g) for g in goals)
