"""Shared fixtures for wordpick tests."""

import pytest

from wordpick.session import RunningFlag, Session

WORDS = ["cat", "car", "bar", "cot"]


class ScriptedInput:
    """Poll function that replays a fixed list of key events."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.calls = 0

    def __call__(self):
        if not self.keys:
            raise AssertionError("poll() called after the key script ran out")
        self.calls += 1
        return self.keys.pop(0)


class RecordingRender:
    """Render function that remembers every frame it was asked to paint."""

    def __init__(self):
        self.frames = []

    def __call__(self, query, ranked, index):
        self.frames.append((query, list(ranked), index))

    @property
    def last(self):
        return self.frames[-1]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def session(words):
    return Session(words, RunningFlag())


@pytest.fixture
def render():
    return RecordingRender()
