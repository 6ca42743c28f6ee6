"""A counter base class whose behaviour a subclass inherits unchanged."""

import sys


class BaseCounter:
    """Counts calls to ``increment`` and reports each new value on a stream."""

    def __init__(self, stream=None):
        self._count = 0
        self._stream = stream

    def increment(self):
        """Add one to the count, report it and return the new value."""
        self._count += 1
        print(f"count = {self._count}", file=self._stream if self._stream is not None else sys.stdout)
        return self._count


class DerivedCounter(BaseCounter):
    """A counter that uses everything it inherits from BaseCounter."""