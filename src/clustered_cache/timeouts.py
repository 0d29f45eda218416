"""Timeouts para operações do cliente de cache clusterizado.

Agrupa os três limites de tempo usados para operações remotas:
- leitura (get, lookup)
- mutação (put, remove, replace)
- ciclo de vida (validate, validate_cache)

Uso básico:
    ```python
    from datetime import timedelta

    from clustered_cache import TimeoutSet, nanos_starting_from_now

    timeouts = (
        TimeoutSet.builder()
        .set_read_operation_timeout(timedelta(seconds=2))
        .set_mutative_operation_timeout(timedelta(seconds=10))
        .build()
    )

    remaining = nanos_starting_from_now(timeouts.read_operation_timeout)
    while remaining() > 0:
        ...
    ```
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from .constants import (
    DEFAULT_OPERATION_TIMEOUT,
    ERROR_TIMEOUT_NONE,
    ERROR_TIMEOUT_TYPE_INVALID,
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class OperationKind(Enum):
    """Categorias de operações remotas limitadas por um timeout."""

    READ = "read"
    MUTATIVE = "mutative"
    LIFECYCLE = "lifecycle"


def to_nanos(timeout: timedelta) -> int:
    """Converte um timedelta em nanossegundos inteiros (sem arredondamento float)."""
    seconds = timeout.days * SECONDS_PER_DAY + timeout.seconds
    return seconds * NANOS_PER_SECOND + timeout.microseconds * NANOS_PER_MICROSECOND


def nanos_starting_from_now(timeout: timedelta) -> Callable[[], int]:
    """Cria uma contagem regressiva a partir do instante atual.

    O prazo é fixado no momento da chamada usando o relógio monotônico.
    Cada chamada da função retornada recalcula o tempo restante.

    Args:
        timeout: Duração até o prazo

    Returns:
        Função sem argumentos que retorna os nanossegundos restantes.
        O valor fica negativo depois que o prazo passa; cabe ao chamador
        tratar valores <= 0 como expirados.
    """
    end = time.monotonic_ns() + to_nanos(timeout)

    def remaining() -> int:
        return end - time.monotonic_ns()

    return remaining


def _require_timedelta(value: object, field: str) -> timedelta:
    """Valida um timeout recebido pelo builder ou pelo construtor."""
    if value is None:
        raise InvalidArgumentError(ERROR_TIMEOUT_NONE.format(field=field), field=field)
    if not isinstance(value, timedelta):
        raise InvalidArgumentError(
            ERROR_TIMEOUT_TYPE_INVALID.format(field=field, type_name=type(value).__name__),
            field=field,
        )
    return value


@dataclass(frozen=True, repr=False)
class TimeoutSet:
    """Timeouts das operações remotas do cliente de cache.

    Instâncias são imutáveis e comparadas por valor. Use
    `TimeoutSet.builder()` para construir.

    Attributes:
        read_operation_timeout: Limite para operações de leitura
        mutative_operation_timeout: Limite para operações que alteram estado
        lifecycle_operation_timeout: Limite para operações de ciclo de vida do store
    """

    read_operation_timeout: timedelta
    mutative_operation_timeout: timedelta
    lifecycle_operation_timeout: timedelta

    def __post_init__(self) -> None:
        _require_timedelta(self.read_operation_timeout, "read_operation_timeout")
        _require_timedelta(self.mutative_operation_timeout, "mutative_operation_timeout")
        _require_timedelta(self.lifecycle_operation_timeout, "lifecycle_operation_timeout")

    nanos_starting_from_now = staticmethod(nanos_starting_from_now)

    @classmethod
    def builder(cls) -> "TimeoutSet.Builder":
        """Retorna um builder com todos os timeouts no valor default (5s)."""
        return cls.Builder()

    def timeout_for(self, kind: OperationKind) -> timedelta:
        """Retorna o timeout da categoria de operação informada."""
        if kind is OperationKind.READ:
            return self.read_operation_timeout
        if kind is OperationKind.MUTATIVE:
            return self.mutative_operation_timeout
        if kind is OperationKind.LIFECYCLE:
            return self.lifecycle_operation_timeout
        raise InvalidArgumentError(f"Tipo de operação desconhecido: {kind!r}", field="kind")

    def __repr__(self) -> str:
        return (
            f"TimeoutSet(read_operation_timeout={self.read_operation_timeout}, "
            f"mutative_operation_timeout={self.mutative_operation_timeout}, "
            f"lifecycle_operation_timeout={self.lifecycle_operation_timeout})"
        )

    __str__ = __repr__

    class Builder:
        """Constrói instâncias de `TimeoutSet`.

        Quando obtido via `TimeoutSet.builder()`, os valores default já
        estão definidos. Não é thread-safe: configure sequencialmente e
        chame `build()`.
        """

        def __init__(self) -> None:
            self._read_operation_timeout = DEFAULT_OPERATION_TIMEOUT
            self._mutative_operation_timeout = DEFAULT_OPERATION_TIMEOUT
            self._lifecycle_operation_timeout = DEFAULT_OPERATION_TIMEOUT

        @classmethod
        def from_timeouts(cls, timeouts: "TimeoutSet") -> "TimeoutSet.Builder":
            """Cria um builder com os valores de um `TimeoutSet` existente."""
            return (
                cls()
                .set_read_operation_timeout(timeouts.read_operation_timeout)
                .set_mutative_operation_timeout(timeouts.mutative_operation_timeout)
                .set_lifecycle_operation_timeout(timeouts.lifecycle_operation_timeout)
            )

        def set_read_operation_timeout(self, timeout: timedelta) -> "TimeoutSet.Builder":
            """Define o timeout de operações de leitura. Default: 5 segundos.

            Args:
                timeout: Duração do timeout de leitura

            Returns:
                Este builder

            Raises:
                InvalidArgumentError: Se timeout for None ou não for timedelta
            """
            self._read_operation_timeout = _require_timedelta(timeout, "read_operation_timeout")
            return self

        def set_mutative_operation_timeout(self, timeout: timedelta) -> "TimeoutSet.Builder":
            """Define o timeout de operações mutativas como put e remove. Default: 5 segundos.

            Args:
                timeout: Duração do timeout de mutação

            Returns:
                Este builder

            Raises:
                InvalidArgumentError: Se timeout for None ou não for timedelta
            """
            self._mutative_operation_timeout = _require_timedelta(timeout, "mutative_operation_timeout")
            return self

        def set_lifecycle_operation_timeout(self, timeout: timedelta) -> "TimeoutSet.Builder":
            """Define o timeout de operações de ciclo de vida como validate e validate_cache.

            Default: 5 segundos.

            Args:
                timeout: Duração do timeout de ciclo de vida

            Returns:
                Este builder

            Raises:
                InvalidArgumentError: Se timeout for None ou não for timedelta
            """
            self._lifecycle_operation_timeout = _require_timedelta(timeout, "lifecycle_operation_timeout")
            return self

        def set_timeout(self, kind: OperationKind, timeout: timedelta) -> "TimeoutSet.Builder":
            """Define o timeout de uma categoria de operação."""
            if kind is OperationKind.READ:
                return self.set_read_operation_timeout(timeout)
            if kind is OperationKind.MUTATIVE:
                return self.set_mutative_operation_timeout(timeout)
            if kind is OperationKind.LIFECYCLE:
                return self.set_lifecycle_operation_timeout(timeout)
            raise InvalidArgumentError(f"Tipo de operação desconhecido: {kind!r}", field="kind")

        def build(self) -> "TimeoutSet":
            """Retorna um novo `TimeoutSet` com os valores atuais do builder."""
            timeouts = TimeoutSet(
                read_operation_timeout=self._read_operation_timeout,
                mutative_operation_timeout=self._mutative_operation_timeout,
                lifecycle_operation_timeout=self._lifecycle_operation_timeout,
            )
            logger.debug(f"TimeoutSet construído: {timeouts}")
            return timeouts
