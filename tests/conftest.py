"""
Pytest configuration and shared fixtures for primlib tests.
"""

import io

import pytest

from primlib.runtime.context import RuntimeContext, SEED_ENV_VAR, set_default_context


@pytest.fixture(autouse=True)
def clean_runtime(monkeypatch):
    """Isolate each test from the process-wide context and the seed variable."""
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)
    set_default_context(None)
    yield
    set_default_context(None)


@pytest.fixture
def context_factory():
    """Factory fixture for creating contexts over in-memory streams."""

    def _create_context(stdin_text: str = "", seed: int = 1234) -> RuntimeContext:
        return RuntimeContext(
            seed=seed,
            stdin=io.StringIO(stdin_text),
            stdout=io.StringIO(),
        )

    return _create_context


@pytest.fixture
def context(context_factory):
    """A seeded context with empty input."""
    return context_factory()


@pytest.fixture
def output(context):
    """Return everything written to the context's stdout so far."""

    def _output() -> str:
        return context.stdout.getvalue()

    return _output
