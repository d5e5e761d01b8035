"""Shared fakes for screenrec tests."""

import pytest


class FakeProcess:
    """Stands in for a ProcessHandle; records kill calls."""

    def __init__(self, command, args, kill_error=None):
        self.command = command
        self.args = args
        self.kill_error = kill_error
        self.killed = False

    def kill(self):
        if self.kill_error is not None:
            raise self.kill_error
        self.killed = True


class FakeSpawner:
    """Callable spawner that remembers every invocation."""

    def __init__(self, error=None, kill_error=None):
        self.error = error
        self.kill_error = kill_error
        self.calls = []
        self.processes = []

    def __call__(self, command, args, log_path=None):
        self.calls.append((command, list(args)))
        if self.error is not None:
            raise self.error
        process = FakeProcess(command, args, kill_error=self.kill_error)
        self.processes.append(process)
        return process

    @property
    def last_args(self):
        return self.calls[-1][1]


class FakeTicker:
    """Ticker that only fires when a test calls fire()."""

    def __init__(self, callback):
        self.callback = callback
        self.running = False

    def start(self):
        self.running = True

    def stop(self):
        self.running = False

    def fire(self, times=1):
        for _ in range(times):
            self.callback()


class FakeTickerFactory:
    def __init__(self):
        self.tickers = []

    def __call__(self, callback):
        ticker = FakeTicker(callback)
        self.tickers.append(ticker)
        return ticker

    @property
    def current(self):
        return self.tickers[-1]


class FakeMCP:
    """Captures functions registered with @mcp.tool(...)."""

    def __init__(self):
        self.tools = {}

    def tool(self, description=None):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn
        return decorator


@pytest.fixture
def spawner():
    return FakeSpawner()


@pytest.fixture
def tickers():
    return FakeTickerFactory()


@pytest.fixture
def make_session(tmp_path, spawner, tickers):
    """Build a session for a platform with fake process and ticker."""
    from screenrec.factory import SessionFactory

    def _make(platform_id="mac", **kwargs):
        kwargs.setdefault("spawner", spawner)
        kwargs.setdefault("ticker_factory", tickers)
        kwargs.setdefault("data_dir", tmp_path)
        return SessionFactory(**kwargs).create(platform_id)

    return _make
