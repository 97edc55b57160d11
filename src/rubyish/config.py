"""Library configuration: RubyishConfig, initialization and the shared random source."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass

from rubyish._logging import configure_logging, get_logger

__all__ = [
    'SEED_ENV_VAR',
    'RubyishConfig',
    'get_config',
    'get_random',
    'init',
]

SEED_ENV_VAR = 'RUBYISH_SEED'

logger = get_logger(__name__)


@dataclass(frozen=True)
class RubyishConfig:
    """Configuration for rubyish.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or colored console output (False).
        random_seed: Seed for `Array.sample` / `Array.shuffle`. None = unseeded.
    """

    log_level: str | None = None
    json_logs: bool = True
    random_seed: int | None = None


# Global configuration (set by init(), or lazily by get_config())
_config: RubyishConfig | None = None
_random: random.Random = random.Random()


def _detect_seed() -> int | None:
    """Read the random seed from RUBYISH_SEED, ignoring values that are not integers."""
    raw = os.environ.get(SEED_ENV_VAR, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning('ignoring invalid random seed', env_var=SEED_ENV_VAR, value=raw)
        return None


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    random_seed: int | None = None,
) -> RubyishConfig:
    """Initialize rubyish with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured here.
        random_seed: Seed for the shared random source. Read from
            RUBYISH_SEED if None.

    Returns:
        The RubyishConfig that was set.

    Example:
        ```python
        from rubyish import Array, config

        config.init(random_seed=42)
        Array([1, 2, 3]).shuffle()  # same order on every run
        ```
    """
    global _config, _random  # noqa: PLW0603

    resolved_seed = _detect_seed() if random_seed is None else random_seed

    _config = RubyishConfig(
        log_level=log_level,
        json_logs=json_logs,
        random_seed=resolved_seed,
    )
    _random = random.Random(resolved_seed)

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    logger.debug('rubyish initialized', log_level=log_level, random_seed=resolved_seed)
    return _config


def get_config() -> RubyishConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def get_random() -> random.Random:
    """Get the random source shared by `Array.sample` and `Array.shuffle`."""
    get_config()
    return _random
