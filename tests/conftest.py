"""Pytest fixtures for all tests."""

import io
import json
from datetime import datetime

import pytest

import druuid.internal.logging as log_module
from druuid import Generator, epoch_offset
from druuid.internal.logging import LogLevel, StructuredLogger

# 2016-05-27T01:44:47Z
FIXED_NOW = 1464313487


@pytest.fixture
def offset_2016():
    """Epoch offset anchored at 2016-01-01."""
    return epoch_offset(datetime(2016, 1, 1))


@pytest.fixture
def fixed_clock():
    """Clock provider frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def zero_rand():
    """Random provider that always returns 0.0."""
    return lambda: 0.0


@pytest.fixture
def generator(fixed_clock, zero_rand):
    """Create a deterministic generator with no epoch offset."""
    return Generator(clock=fixed_clock, rand=zero_rand)


@pytest.fixture
def log_stream():
    """Route the process logger to an in-memory stream at DEBUG."""
    original = log_module._logger
    stream = io.StringIO()
    StructuredLogger.configure(LogLevel.DEBUG, stream=stream)
    yield stream
    log_module._logger = original


def read_records(stream):
    """Parse the JSON lines written to a log stream."""
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]
