from collections.abc import Iterable


class ScriptedSource:
    """Source that replays fixed draws and records every request."""

    def __init__(self, values: Iterable[int]):
        self._values = iter(values)
        self.requests: list[tuple[str, int, int]] = []

    def _next(self, low: int, high: int) -> int:
        value = next(self._values)
        if not low <= value <= high:
            raise AssertionError(
                f"scripted value {value} outside [{low}, {high}]"
            )
        return value

    def randrange(self, start: int, stop: int) -> int:
        self.requests.append(("randrange", start, stop))
        return self._next(start, stop - 1)

    def randint(self, a: int, b: int) -> int:
        self.requests.append(("randint", a, b))
        return self._next(a, b)
