"""Configuration utilities for UNDERBAR.

This module centralizes the environment-driven settings the library reads on
demand. Nothing is cached, so tests may patch the environment freely.
"""

import os

from underbar.errors import InvalidSettingError

SHUFFLE_SEED_ENV = "UNDERBAR_SHUFFLE_SEED"  # pragma: no mutate
TIMER_THREAD_NAME_ENV = "UNDERBAR_TIMER_THREAD_NAME"  # pragma: no mutate

DEFAULT_TIMER_THREAD_NAME = "underbar-timer"


def get_shuffle_seed() -> int | None:
    """Get the seed used by `shuffle` when no generator is supplied.

    Returns:
        The integer value of `UNDERBAR_SHUFFLE_SEED`, or None when unset or blank.

    Raises:
        InvalidSettingError: If `UNDERBAR_SHUFFLE_SEED` is not an integer.
    """
    if not (raw := os.environ.get(SHUFFLE_SEED_ENV, "").strip()):
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidSettingError(SHUFFLE_SEED_ENV, raw, "expected an integer") from e


def get_timer_thread_name() -> str:
    """Get the name given to the timer thread that runs delayed calls."""
    return os.environ.get(TIMER_THREAD_NAME_ENV, "").strip() or DEFAULT_TIMER_THREAD_NAME
