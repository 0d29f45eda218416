"""clustered-cache-timeouts: timeouts de operações para clientes de cache clusterizado.

Uso básico:
    ```python
    from datetime import timedelta

    from clustered_cache import TimeoutSet

    timeouts = (
        TimeoutSet.builder()
        .set_read_operation_timeout(timedelta(seconds=2))
        .set_lifecycle_operation_timeout(timedelta(seconds=30))
        .build()
    )
    ```

Com variáveis de ambiente:
    ```python
    from clustered_cache import TimeoutConfig

    # CLUSTERED_CACHE_READ_TIMEOUT_SECONDS=2.5
    timeouts = TimeoutConfig.from_env()
    ```
"""

__version__ = "0.1.0"

# Configuração
from .config import TimeoutConfig
from .constants import DEFAULT_OPERATION_TIMEOUT

# Exceções
from .exceptions import (
    InvalidArgumentError,
    TimeoutConfigurationError,
    TimeoutExhaustedError,
)

# Integração httpx
from .transport import remaining_httpx_timeout, timeouts_for_kind, to_httpx_timeout

# Timeouts
from .timeouts import OperationKind, TimeoutSet, nanos_starting_from_now, to_nanos

__all__ = [
    # Timeouts
    "TimeoutSet",
    "OperationKind",
    "DEFAULT_OPERATION_TIMEOUT",
    "nanos_starting_from_now",
    "to_nanos",
    # Configuração
    "TimeoutConfig",
    # Integração httpx
    "to_httpx_timeout",
    "timeouts_for_kind",
    "remaining_httpx_timeout",
    # Exceções
    "TimeoutConfigurationError",
    "InvalidArgumentError",
    "TimeoutExhaustedError",
]
