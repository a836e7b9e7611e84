"""
Exceptions raised for caller misconfiguration.

All usage errors are raised synchronously, before any expansion work,
and are never retried. A search that finds nothing is not an error:
it returns an empty path.
"""


class UsageError(ValueError):
    """The engine was called with arguments it cannot act on."""


class UnknownAlgorithmError(UsageError):
    """The algorithm selector is not one of the recognized algorithms."""

    def __init__(self, value):
        self.value = value
        super().__init__(f'Algorithm "{value}" is not applicable')


class HeuristicArityError(UsageError):
    """More than one heuristic function was passed to a search."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Number of heuristic functions passed cannot be larger than one (got {count})"
        )


__all__ = ['UsageError', 'UnknownAlgorithmError', 'HeuristicArityError']
