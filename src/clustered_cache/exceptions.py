"""Exceções para configuração de timeouts do cliente de cache clusterizado."""


class TimeoutConfigurationError(Exception):
    """Erro base para configuração de timeouts."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidArgumentError(TimeoutConfigurationError, ValueError):
    """Valor inválido (None ou tipo errado) passado a um setter do builder."""

    pass


class TimeoutExhaustedError(TimeoutConfigurationError):
    """O prazo de uma contagem regressiva já expirou."""

    def __init__(self, message: str, remaining_nanos: int) -> None:
        self.remaining_nanos = remaining_nanos
        super().__init__(message)
