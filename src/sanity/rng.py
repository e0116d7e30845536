"""Per-thread random generators backing shuffle.

Each thread lazily gets its own random.Random, seeded from the active
configuration, so no generator is ever shared between threads. Installing
a new configuration makes every thread rebuild its generator on next use.
"""

from __future__ import annotations

import logging
import random
import threading

from sanity.config import get_config

logger = logging.getLogger(__name__)

_local = threading.local()


def generator() -> random.Random:
    """Return the calling thread's generator, creating it on first use."""
    config = get_config()
    rng: random.Random | None = getattr(_local, "rng", None)
    if rng is None or getattr(_local, "config", None) is not config:
        rng = random.Random(config.seed)
        _local.rng = rng
        _local.config = config
        logger.debug(
            "created generator for thread %s (seed=%r)",
            threading.current_thread().name,
            config.seed,
        )
    return rng


def seed(value: int | None) -> None:
    """Reseed the calling thread's generator.

    Args:
        value: New seed, or None for OS entropy
    """
    generator().seed(value)
    logger.debug("reseeded generator for thread %s (seed=%r)", threading.current_thread().name, value)


def reset() -> None:
    """Drop the calling thread's generator so the next use re-reads configuration."""
    for name in ("rng", "config"):
        if hasattr(_local, name):
            delattr(_local, name)
