"""Random index sources consumed by the string generator."""

import logging
import random
import threading
import time
from typing import Protocol

logger = logging.getLogger(__name__)


class RandomIndexSource(Protocol):
    """Anything that draws uniform integers on demand.

    `random.Random` and `random.SystemRandom` both satisfy this protocol.
    """

    def randrange(self, start: int, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


def secure_source() -> random.SystemRandom:
    """Return a source backed by the OS entropy pool. Cannot be seeded."""
    return random.SystemRandom()


def clock_seed() -> int:
    return int(time.time())


def fast_source(seed: int | None = None) -> random.Random:
    """Return a fast, NOT secure, explicitly seeded source.

    Without a seed, the current UNIX time in whole seconds is used.
    """
    if seed is None:
        seed = clock_seed()
    logger.debug("Seeding fast source with %d", seed)
    return random.Random(seed)


class SharedSource:
    """Serializes draws from one source shared by several callers."""

    def __init__(self, source: RandomIndexSource):
        self._source = source
        self._lock = threading.Lock()
        self.draws = 0

    def randrange(self, start: int, stop: int) -> int:
        with self._lock:
            self.draws += 1
            return self._source.randrange(start, stop)

    def randint(self, a: int, b: int) -> int:
        with self._lock:
            self.draws += 1
            return self._source.randint(a, b)
