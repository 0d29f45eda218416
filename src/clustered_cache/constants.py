"""
Timeout constants for the clustered cache client.

Defines default values, environment variable names and message templates
used across the package to avoid magic numbers and duplicated strings.
"""

from datetime import timedelta

# Timeout configuration
DEFAULT_OPERATION_TIMEOUT: timedelta = timedelta(seconds=5)
"""Default bound for read, mutative and lifecycle operations."""

NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_MICROSECOND: int = 1_000
SECONDS_PER_DAY: int = 86_400

# Environment variables
ENV_READ_TIMEOUT_SECONDS = "CLUSTERED_CACHE_READ_TIMEOUT_SECONDS"
ENV_MUTATIVE_TIMEOUT_SECONDS = "CLUSTERED_CACHE_MUTATIVE_TIMEOUT_SECONDS"
ENV_LIFECYCLE_TIMEOUT_SECONDS = "CLUSTERED_CACHE_LIFECYCLE_TIMEOUT_SECONDS"

# Error message templates
ERROR_TIMEOUT_NONE = "{field} não pode ser None"
ERROR_TIMEOUT_TYPE_INVALID = "{field} deve ser timedelta, recebido {type_name}"
ERROR_TIMEOUT_EXHAUSTED = "Timeout esgotado há {overdue_ms:.3f}ms"
