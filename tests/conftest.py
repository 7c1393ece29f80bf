"""Pytest configuration for hermesx tests."""

import io

import pytest
import signal
import sys

from hermesx import EventLoopHost, RuntimeContext


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "timeout(seconds): set custom timeout for test")


def timeout_handler(signum, frame):
    """Handle timeout signal."""
    pytest.fail("Test timed out")


@pytest.fixture(autouse=True)
def test_timeout(request):
    """Apply a timeout to all tests.

    Default is 10 seconds, but tests can use a longer timeout by marking them:
    @pytest.mark.timeout(30)  # 30 second timeout
    """
    if sys.platform != "win32":
        marker = request.node.get_closest_marker("timeout")
        timeout_seconds = marker.args[0] if marker else 10

        old_handler = signal.signal(signal.SIGALRM, timeout_handler)
        signal.alarm(timeout_seconds)
        yield
        signal.alarm(0)
        signal.signal(signal.SIGALRM, old_handler)
    else:
        yield


class VirtualClock:
    """Millisecond clock that only moves when something sleeps or advances it."""

    def __init__(self, start: float = 1_000_000.0):
        self.ms = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.ms

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.ms += seconds * 1000

    def advance(self, ms: float) -> None:
        self.ms += ms


class Output(io.StringIO):
    """Captured host output."""

    def lines(self):
        return self.getvalue().splitlines()


@pytest.fixture
def clock():
    return VirtualClock()


@pytest.fixture
def output():
    return Output()


@pytest.fixture
def host(clock, output):
    return EventLoopHost(stdout=output, clock=clock, sleep=clock.sleep)


@pytest.fixture
def context(host):
    return RuntimeContext(host, env={"HOME": "/home/test"})
