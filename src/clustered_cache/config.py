"""
Configuration management for operation timeouts.

Handles environment variables and default values for the timeouts of
the clustered cache client.
"""

import logging
import math
import os
from datetime import timedelta

from .constants import (
    DEFAULT_OPERATION_TIMEOUT,
    ENV_LIFECYCLE_TIMEOUT_SECONDS,
    ENV_MUTATIVE_TIMEOUT_SECONDS,
    ENV_READ_TIMEOUT_SECONDS,
)
from .timeouts import OperationKind, TimeoutSet

logger = logging.getLogger(__name__)


class TimeoutConfig:
    """Configuration manager for operation timeouts.

    Resolves each timeout following the precedence rules:

    1. Explicit value (highest precedence)
    2. Environment variable, in decimal seconds
    3. Default value (lowest precedence)
    """

    # Environment variable names
    ENV_TIMEOUT_SECONDS = {
        OperationKind.READ: ENV_READ_TIMEOUT_SECONDS,
        OperationKind.MUTATIVE: ENV_MUTATIVE_TIMEOUT_SECONDS,
        OperationKind.LIFECYCLE: ENV_LIFECYCLE_TIMEOUT_SECONDS,
    }

    # Default values
    DEFAULT_TIMEOUT = DEFAULT_OPERATION_TIMEOUT

    @classmethod
    def resolve_timeout(cls, kind: OperationKind, explicit_value: timedelta | None = None) -> timedelta:
        """Resolve one operation timeout following precedence rules.

        Args:
            kind: Operation category whose timeout is resolved
            explicit_value: Explicit timeout from the caller

        Returns:
            Resolved timeout
        """
        if explicit_value is not None:
            return explicit_value

        env_value = cls._read_env_timeout(kind)
        if env_value is not None:
            return env_value

        return cls.DEFAULT_TIMEOUT

    @classmethod
    def builder_from_env(cls) -> TimeoutSet.Builder:
        """Return a builder preset with environment overrides.

        Setters called on the returned builder take precedence over the
        environment values.
        """
        builder = TimeoutSet.builder()
        for kind in OperationKind:
            builder.set_timeout(kind, cls.resolve_timeout(kind))
        return builder

    @classmethod
    def from_env(cls) -> TimeoutSet:
        """Build a `TimeoutSet` from environment variables and defaults."""
        return cls.builder_from_env().build()

    @classmethod
    def _read_env_timeout(cls, kind: OperationKind) -> timedelta | None:
        """Read a timeout in seconds from the environment.

        Invalid values are logged and ignored.
        """
        env_name = cls.ENV_TIMEOUT_SECONDS[kind]
        raw_value = os.getenv(env_name)
        if not raw_value or not raw_value.strip():
            return None

        try:
            seconds = float(raw_value)
        except ValueError:
            logger.warning(f"Ignoring {env_name}={raw_value!r}: not a number")
            return None

        if not math.isfinite(seconds) or seconds < 0:
            logger.warning(f"Ignoring {env_name}={raw_value!r}: must be a finite, non-negative number of seconds")
            return None

        try:
            timeout = timedelta(seconds=seconds)
        except OverflowError:
            logger.warning(f"Ignoring {env_name}={raw_value!r}: out of range")
            return None

        logger.debug(f"{kind.value} timeout set from {env_name}: {seconds}s")
        return timeout
