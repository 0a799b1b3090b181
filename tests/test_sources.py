import random
import threading

from rsgen.core import sources
from rsgen.core.sources import SharedSource, fast_source, secure_source


def test_secure_source_is_system_random() -> None:
    assert isinstance(secure_source(), random.SystemRandom)


def test_fast_source_is_reproducible() -> None:
    a = fast_source(1234)
    b = fast_source(1234)
    assert [a.randrange(0, 62) for _ in range(50)] == [
        b.randrange(0, 62) for _ in range(50)
    ]


def test_fast_source_seeds_from_clock(monkeypatch) -> None:
    monkeypatch.setattr(sources, "clock_seed", lambda: 99)
    a = fast_source()
    b = random.Random(99)
    assert [a.randint(0, 9) for _ in range(20)] == [
        b.randint(0, 9) for _ in range(20)
    ]


def test_shared_source_counts_draws() -> None:
    shared = SharedSource(fast_source(7))
    shared.randrange(0, 10)
    shared.randint(0, 9)
    assert shared.draws == 2


def test_shared_source_matches_wrapped_sequence() -> None:
    shared = SharedSource(fast_source(5))
    plain = fast_source(5)
    assert [shared.randint(0x20, 0x7E) for _ in range(30)] == [
        plain.randint(0x20, 0x7E) for _ in range(30)
    ]


def test_shared_source_serializes_threads() -> None:
    shared = SharedSource(fast_source(3))

    def worker() -> None:
        for _ in range(1000):
            shared.randrange(0, 62)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert shared.draws == 4000
