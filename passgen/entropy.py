# SecureRandom
# (cryptographically secure random numbers)
#

from random import SystemRandom

from .errors import RangeError, EntropyError


class SecureRandom:

    """Uniform random integers from a cryptographically secure source.

    By default, numbers are taken from the OS CSPRNG (:class:`random.SystemRandom`).
    Any object providing ``randrange()`` can be passed as `source`,
    e.g. a seeded :class:`random.Random` for reproducible tests.

    """

    def __init__(self, source=None):
        self._source = source if source is not None else SystemRandom()

    def random_index(self, bound: int) -> int:
        """Return random integer in range [0, bound)."""
        if bound <= 0:
            raise RangeError(f"bound must be greater than 0 (got {bound})")
        try:
            return self._source.randrange(bound)
        except (OSError, NotImplementedError) as e:
            raise EntropyError(e) from e

    def random_in_range(self, lo: int, hi: int) -> int:
        """Return random integer in range [lo, hi], both inclusive."""
        if lo > hi:
            raise RangeError(f"min must be less than or equal to max (got {lo} > {hi})")
        return lo + self.random_index(hi - lo + 1)

    def choice(self, seq):
        return seq[self.random_index(len(seq))]


secure_random = SecureRandom()
