"""
Shared type definitions for tree search.

This module contains the data model used across the engine and fringe
modules to avoid circular import issues.

Types:
    Move: A named, costed state-transition function
    Node: One point in the search tree
    Path: Ordered tuple of Nodes from root to goal
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

S = TypeVar("S")


@dataclass(frozen=True)
class Move(Generic[S]):
    """A successor function of a search problem.

    The transition returns the successor state, or None when the move is
    not applicable at the given state.

    Attributes:
        name: Human-readable move name (e.g., "LEFT")
        transition: Function from a state to its successor (or None)
        cost: Fixed non-negative cost of taking this move
    """
    name: str
    transition: Callable[[S], Optional[S]]
    cost: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Move name must be a non-empty string, got {self.name!r}")
        if not callable(self.transition):
            raise TypeError(f"Move {self.name!r} transition is not callable")
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise TypeError(f"Move {self.name!r} cost must be an int, got {type(self.cost).__name__}")
        if self.cost < 0:
            raise ValueError(f"Move {self.name!r} cost cannot be negative ({self.cost})")

    def apply(self, state: S) -> Optional[S]:
        """Apply this move to state; None means no successor."""
        return self.transition(state)

    def __repr__(self) -> str:
        return f"Move({self.name!r}, cost={self.cost})"


class Node(Generic[S]):
    """
    A node of the search tree.

    Wraps a state together with the information needed to reconstruct how
    it was reached: parent node, producing move, cost and depth.

    Nodes are created by the engine through Node.root() and child(); the
    constructor is internal and callers should not build nodes directly.
    Nodes are immutable once created. Ordering
    compares `cost` only; equality stays identity-based, so two nodes of
    equal cost are neither less than one another nor interchangeable.

    Attributes:
        state: Problem-dependent state held by this node.
        parent: Parent node (None for the root).
        move: Move that produced this node from its parent (None for the root).
        cost: Ordering key, including any heuristic contribution.
        path_cost: Sum of move costs from the root, without heuristics.
        depth: Number of moves from the root.
    """

    __slots__ = ("_state", "_parent", "_move", "_cost", "_path_cost", "_depth")

    def __init__(
        self,
        state: S,
        parent: "Optional[Node[S]]" = None,
        move: Optional[Move[S]] = None,
        cost: float = 0,
        depth: int = 0,
        path_cost: Optional[float] = None,
    ):
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_move", move)
        object.__setattr__(self, "_cost", cost)
        object.__setattr__(self, "_depth", depth)
        object.__setattr__(self, "_path_cost", cost if path_cost is None else path_cost)

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def root(cls, state: S) -> "Node[S]":
        """Create the root node for a start state."""
        return cls(state)

    def child(self, move: Move[S], state: S, cost: float) -> "Node[S]":
        """Create the node reached from this one by applying move."""
        return Node(
            state,
            parent=self,
            move=move,
            cost=cost,
            depth=self._depth + 1,
            path_cost=self._path_cost + move.cost,
        )

    @property
    def state(self) -> S:
        return self._state

    @property
    def parent(self) -> "Optional[Node[S]]":
        return self._parent

    @property
    def move(self) -> Optional[Move[S]]:
        return self._move

    @property
    def cost(self) -> float:
        return self._cost

    @property
    def path_cost(self) -> float:
        return self._path_cost

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def path(self) -> "Path":
        """Return the nodes from the root to this node, root first."""
        nodes = []
        node = self
        while node is not None:
            nodes.append(node)
            node = node._parent
        nodes.reverse()
        return tuple(nodes)

    def moves(self) -> Tuple[Move[S], ...]:
        """Return the moves taken from the root to reach this node."""
        return tuple(n._move for n in self.path()[1:])

    # Ordering by cost only
    def __lt__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._cost < other._cost

    def __le__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._cost <= other._cost

    def __gt__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._cost > other._cost

    def __ge__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._cost >= other._cost

    def __repr__(self) -> str:
        move_name = self._move.name if self._move is not None else None
        return (
            f"Node(state={self._state!r}, move={move_name!r}, "
            f"cost={self._cost}, depth={self._depth})"
        )

    def __str__(self) -> str:
        return str(self._state)


# Root-first, goal-last; empty when no solution was found.
Path = Tuple[Node, ...]


__all__ = ['Move', 'Node', 'Path']
