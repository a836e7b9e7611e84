"""
Search algorithm selectors.

The six algorithms form one closed enumeration split into two groups:

    UNINFORMED: DFS, BFS, UCS, IDS
    INFORMED:   GREEDY, A_STAR

Only informed algorithms consult the heuristic function.
"""

from enum import Enum
from typing import Union

from .errors import UnknownAlgorithmError


class Algorithm(str, Enum):
    """Available search strategies."""
    DFS = "dfs"
    BFS = "bfs"
    UCS = "ucs"
    IDS = "ids"
    GREEDY = "greedy"
    A_STAR = "a_star"

    @property
    def informed(self) -> bool:
        """True for algorithms that order the fringe by a heuristic."""
        return self in INFORMED

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """
        Resolve an algorithm selector.

        Accepts an Algorithm member, or a member name/value in any case
        ("A_STAR", "a_star", "astar" and "a*" all name A*).

        Raises:
            UnknownAlgorithmError: If value names no known algorithm.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            found = _ALIASES.get(key)
            if found is not None:
                return found
        raise UnknownAlgorithmError(value)

    def __str__(self) -> str:
        return self.name


UNINFORMED = frozenset({Algorithm.DFS, Algorithm.BFS, Algorithm.UCS, Algorithm.IDS})
INFORMED = frozenset({Algorithm.GREEDY, Algorithm.A_STAR})

_ALIASES = {a.value: a for a in Algorithm}
_ALIASES.update({a.name.lower(): a for a in Algorithm})
_ALIASES.update({"astar": Algorithm.A_STAR, "a*": Algorithm.A_STAR, "gs": Algorithm.GREEDY})


__all__ = ['Algorithm', 'UNINFORMED', 'INFORMED']
