"""
Shared fakes for the test suite
"""
import pytest


class ScriptedRandom:
    """Replays a fixed list of integers, checking each one against the requested range."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def _next(self, low, high):
        assert self.values, "scripted randomness exhausted"
        value = self.values.pop(0)
        assert low <= value <= high, "{} not in [{}, {}]".format(value, low, high)
        self.calls.append((low, high))
        return value

    def randrange(self, n):
        return self._next(0, n - 1)

    def randint(self, a, b):
        return self._next(a, b)


class ScriptedWords:
    def __init__(self, words):
        self.words = list(words)

    def draw(self):
        return self.words.pop(0)


@pytest.fixture
def wordlist(tmp_path):
    """Write a word list and return its path"""
    def write(*lines):
        path = tmp_path / "words.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return write
