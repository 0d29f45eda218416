"""Adaptadores de timeouts para clientes httpx.

Permite que um cliente baseado em httpx use diretamente os limites de
um `TimeoutSet` ou o tempo restante de uma contagem regressiva.
"""

import logging
from collections.abc import Callable
from datetime import timedelta

import httpx

from .constants import ERROR_TIMEOUT_EXHAUSTED, NANOS_PER_MILLISECOND, NANOS_PER_SECOND
from .exceptions import TimeoutExhaustedError
from .timeouts import OperationKind, TimeoutSet

logger = logging.getLogger(__name__)


def to_httpx_timeout(timeout: timedelta) -> httpx.Timeout:
    """Converte um timedelta em `httpx.Timeout`.

    O mesmo limite é aplicado a connect, read, write e pool.
    """
    return httpx.Timeout(timeout.total_seconds())


def timeouts_for_kind(timeouts: TimeoutSet, kind: OperationKind) -> httpx.Timeout:
    """Retorna o `httpx.Timeout` da categoria de operação informada."""
    return to_httpx_timeout(timeouts.timeout_for(kind))


def remaining_httpx_timeout(countdown: Callable[[], int]) -> httpx.Timeout:
    """Converte o tempo restante de uma contagem regressiva em `httpx.Timeout`.

    Útil ao repetir chamadas dentro de um mesmo prazo: cada tentativa
    recebe apenas o tempo que ainda resta.

    Args:
        countdown: Função retornada por `nanos_starting_from_now`

    Returns:
        Timeout com o tempo restante em segundos

    Raises:
        TimeoutExhaustedError: Se o prazo já expirou
    """
    remaining_nanos = countdown()
    if remaining_nanos <= 0:
        message = ERROR_TIMEOUT_EXHAUSTED.format(overdue_ms=-remaining_nanos / NANOS_PER_MILLISECOND)
        logger.debug(message)
        raise TimeoutExhaustedError(message, remaining_nanos=remaining_nanos)
    return httpx.Timeout(remaining_nanos / NANOS_PER_SECOND)
