"""Library configuration."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CollisionPolicy = Literal["last_wins", "error"]


class SanityConfig(BaseSettings):
    """Settings shared by the combinators, read from SANITY_* variables.

    Attributes:
        seed: Seed for per-thread random generators. None draws from OS entropy.
        rename_collision: What rename_keys does when two keys land on one target.
    """

    model_config = SettingsConfigDict(
        env_prefix="SANITY_",
        env_ignore_empty=True,
        case_sensitive=False,
        frozen=True,
        extra="forbid",
    )

    seed: int | None = Field(default=None, description="Seed for per-thread generators")
    rename_collision: CollisionPolicy = Field(
        default="last_wins",
        description="Policy when rename_keys maps two keys onto one",
    )

    @classmethod
    def from_env(cls) -> SanityConfig:
        """Build a config from the environment.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        config = cls()
        logger.debug("loaded configuration from environment: %s", config)
        return config


_active: SanityConfig | None = None


def get_config() -> SanityConfig:
    """Return the active configuration, reading the environment on first use."""
    global _active
    if _active is None:
        _active = SanityConfig.from_env()
    return _active


def configure(config: SanityConfig | None = None, **overrides: Any) -> SanityConfig:
    """Install a new active configuration.

    Per-thread generators built from an earlier configuration are rebuilt
    on their next use, so a new seed takes effect everywhere.

    Args:
        config: Base configuration, defaults to the current one
        **overrides: Field values replacing those of the base

    Returns:
        The configuration now in effect
    """
    global _active
    base = config if config is not None else get_config()
    if overrides:
        base = SanityConfig(**{**base.model_dump(), **overrides})
    _active = base
    return _active
