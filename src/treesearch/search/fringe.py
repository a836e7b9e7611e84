"""
Search fringe (frontier) implementations.

The fringe holds generated-but-not-yet-expanded nodes. Its removal order
is what distinguishes one search strategy from another:

    DFS, IDS             -> StackFringe     (LIFO)
    BFS                  -> QueueFringe     (FIFO)
    UCS, GREEDY, A_STAR  -> PriorityFringe  (lowest Node.cost first)

The discipline is fixed when the fringe is built by make_fringe() and
never changes during a run.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Dict, List, Tuple

from ..algorithms import Algorithm
from ..errors import UnknownAlgorithmError
from ..types import Node


class Fringe(ABC):
    """Common interface of the three fringe disciplines."""

    @abstractmethod
    def push(self, node: Node) -> None:
        """Add a node to the fringe."""

    @abstractmethod
    def pop(self) -> Node:
        """Remove and return the next node. Raises IndexError when empty."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def is_empty(self) -> bool:
        return len(self) == 0

    def __bool__(self) -> bool:
        return not self.is_empty()


class StackFringe(Fringe):
    """Last in, first out."""

    def __init__(self):
        self._items: List[Node] = []

    def push(self, node: Node) -> None:
        self._items.append(node)

    def pop(self) -> Node:
        if not self._items:
            raise IndexError("pop from an empty fringe")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class QueueFringe(Fringe):
    """First in, first out."""

    def __init__(self):
        self._items: deque = deque()

    def push(self, node: Node) -> None:
        self._items.append(node)

    def pop(self) -> Node:
        if not self._items:
            raise IndexError("pop from an empty fringe")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class PriorityFringe(Fringe):
    """
    Min-heap on Node.cost.

    Nodes of equal cost leave in insertion order (FIFO), so runs are
    reproducible.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Node]] = []
        self._counter = itertools.count()

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.cost, next(self._counter), node))

    def pop(self) -> Node:
        if not self._heap:
            raise IndexError("pop from an empty fringe")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


FRINGE_TYPES: Dict[Algorithm, Callable[[], Fringe]] = {
    Algorithm.DFS: StackFringe,
    Algorithm.IDS: StackFringe,
    Algorithm.BFS: QueueFringe,
    Algorithm.UCS: PriorityFringe,
    Algorithm.GREEDY: PriorityFringe,
    Algorithm.A_STAR: PriorityFringe,
}


def make_fringe(algorithm: Algorithm) -> Fringe:
    """
    Build an empty fringe with the discipline of the given algorithm.

    Raises:
        UnknownAlgorithmError: If algorithm is not a recognized selector.
    """
    factory = FRINGE_TYPES.get(Algorithm.parse(algorithm))
    if factory is None:
        raise UnknownAlgorithmError(algorithm)
    return factory()


__all__ = [
    'Fringe',
    'StackFringe',
    'QueueFringe',
    'PriorityFringe',
    'FRINGE_TYPES',
    'make_fringe',
]
