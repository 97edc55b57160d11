"""Pytest configuration shared by all rubyish tests."""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING, Any

import pytest
import rubyish.config as config_module
from rubyish._logging import configure_logging, reset_logging

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from an uninitialized configuration, no seed in the environment and no log handler."""
    monkeypatch.delenv(config_module.SEED_ENV_VAR, raising=False)
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.setattr(config_module, '_random', config_module._random)
    yield
    reset_logging()


@pytest.fixture
def seeded() -> config_module.RubyishConfig:
    """Initialize rubyish with a fixed random seed."""
    return config_module.init(random_seed=1234)


@pytest.fixture
def log_events() -> Callable[[], list[dict[str, Any]]]:
    """Configure DEBUG JSON logging into a buffer; calling the fixture value parses the events so far."""
    buffer = io.StringIO()
    configure_logging('DEBUG', json_output=True, stream=buffer)

    def events() -> list[dict[str, Any]]:
        return [json.loads(line) for line in buffer.getvalue().splitlines() if line]

    return events
