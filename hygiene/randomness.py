"""
Randomness Sources for Password Hygiene Coach

Every operation that needs randomness takes an optional ``source`` argument
instead of reaching for a module-level generator. A source is any object with
a ``randbelow(n)`` method returning an int in ``[0, n)``.

- SecureRandomSource draws from the operating system via the secrets module
  and is what callers get by default.
- SeededRandomSource wraps random.Random with a fixed seed so tests and
  demonstrations can reproduce a run. It is NOT suitable for real passwords.

SECURITY NOTES:
- A failing OS entropy pool is reported as RandomUnavailable. There is no
  silent fallback to the random module.
"""

import random
import secrets
from typing import Optional


class RandomUnavailable(Exception):
    """
    Raised when the cryptographically secure random source cannot be used.

    This is the only fatal condition of the engine: callers should report it
    and stop instead of retrying with a weaker generator.
    """
    pass


class SecureRandomSource:
    """
    Cryptographically secure source backed by the secrets module.

    The secrets module keeps no state of its own (each draw goes to the OS),
    so a single instance can be shared freely between calls and threads.
    """

    def randbelow(self, upper: int) -> int:
        """Return a uniformly distributed int in [0, upper)."""
        if upper <= 0:
            raise ValueError("Upper bound must be positive")
        try:
            return secrets.randbelow(upper)
        except (NotImplementedError, OSError) as e:
            raise RandomUnavailable(f"Secure random source unavailable: {e}") from e

    def __repr__(self) -> str:
        return "SecureRandomSource()"


class SeededRandomSource:
    """
    Deterministic source for tests and reproducible demonstrations.

    Args:
        seed: Any value accepted by random.Random

    Example:
        >>> a, b = SeededRandomSource(42), SeededRandomSource(42)
        >>> a.randbelow(1000) == b.randbelow(1000)
        True
    """

    def __init__(self, seed: Optional[object] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("Upper bound must be positive")
        return self._random.randrange(upper)

    def __repr__(self) -> str:
        return f"SeededRandomSource({self.seed!r})"


_DEFAULT_SOURCE = SecureRandomSource()


def default_source() -> SecureRandomSource:
    """Return the shared secure source used when callers pass none."""
    return _DEFAULT_SOURCE


def resolve_source(source=None):
    """Return ``source`` or the shared secure source when it is None."""
    return source if source is not None else _DEFAULT_SOURCE


def choice(pool, source=None):
    """Pick one element of a non-empty sequence uniformly at random."""
    if not pool:
        raise ValueError("Cannot choose from an empty pool")
    source = resolve_source(source)
    return pool[source.randbelow(len(pool))]


__all__ = [
    'RandomUnavailable',
    'SecureRandomSource',
    'SeededRandomSource',
    'default_source',
]
