"""Attempt policy of the generation loop."""
import itertools
from typing import Iterator, Optional


class RetryPolicy:
    """Yields attempt numbers, starting at 1.

    Args:
        max_attempts (Optional[int]): Upper bound of attempts. None never stops.
    """

    def __init__(self, max_attempts: Optional[int] = None):
        if max_attempts is not None and max_attempts <= 0:
            raise ValueError("`max_attempts` should be positive or None")
        self.max_attempts = max_attempts

    @property
    def bounded(self) -> bool:
        return self.max_attempts is not None

    def attempts(self) -> Iterator[int]:
        if self.max_attempts is None:
            return itertools.count(1)
        return iter(range(1, self.max_attempts + 1))
