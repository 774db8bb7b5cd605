"""Pytest configuration and fixtures."""

import random
from datetime import datetime, timedelta, timezone

import pytest

from shortlinks import create_app
from shortlinks.store import ShortURLStore


START = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, now=START):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class ScriptedRandom:
    """Random source whose ``choices`` returns the given codes in order."""

    def __init__(self, codes):
        self.codes = list(codes)
        self.calls = 0

    def choices(self, population, k):
        code = self.codes[self.calls % len(self.codes)]
        self.calls += 1
        return list(code)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store(clock, rng):
    return ShortURLStore(clock=clock, rng=rng)


@pytest.fixture
def app(clock, rng):
    return create_app('testing', clock=clock, rng=rng)


@pytest.fixture
def client(app):
    return app.test_client()
