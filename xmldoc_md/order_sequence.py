"""Run-scoped generator for the ``order`` of metadata records."""

import itertools


class OrderSequence:
    """Hands out strictly increasing integers, one per created record.

    A single instance is shared by every source loaded in one run so that
    records coming from different files still have a total order.
    """

    def __init__(self, start: int = 1) -> None:
        """Start counting at ``start``."""
        self._counter = itertools.count(start)

    def next(self) -> int:
        """Return the next value of the sequence."""
        return next(self._counter)
