"""Testes para resolução de timeouts via variáveis de ambiente."""

import logging
from datetime import timedelta

import pytest

from clustered_cache.config import TimeoutConfig
from clustered_cache.constants import (
    DEFAULT_OPERATION_TIMEOUT,
    ENV_LIFECYCLE_TIMEOUT_SECONDS,
    ENV_MUTATIVE_TIMEOUT_SECONDS,
    ENV_READ_TIMEOUT_SECONDS,
)
from clustered_cache.timeouts import OperationKind, TimeoutSet


class TestResolveTimeout:
    """Testes para TimeoutConfig.resolve_timeout."""

    def test_default_without_env(self, clean_timeout_env) -> None:
        """Sem env var, deve usar o default."""
        assert TimeoutConfig.resolve_timeout(OperationKind.READ) == DEFAULT_OPERATION_TIMEOUT

    def test_env_value_in_seconds(self, clean_timeout_env) -> None:
        """Deve ler segundos decimais da env var."""
        clean_timeout_env.setenv(ENV_READ_TIMEOUT_SECONDS, "2.5")

        assert TimeoutConfig.resolve_timeout(OperationKind.READ) == timedelta(seconds=2.5)

    def test_explicit_value_takes_precedence(self, clean_timeout_env) -> None:
        """Valor explícito deve prevalecer sobre a env var."""
        clean_timeout_env.setenv(ENV_MUTATIVE_TIMEOUT_SECONDS, "30")

        resolved = TimeoutConfig.resolve_timeout(OperationKind.MUTATIVE, timedelta(seconds=1))

        assert resolved == timedelta(seconds=1)

    def test_env_per_kind(self, clean_timeout_env) -> None:
        """Cada categoria deve usar sua própria env var."""
        clean_timeout_env.setenv(ENV_LIFECYCLE_TIMEOUT_SECONDS, "60")

        assert TimeoutConfig.resolve_timeout(OperationKind.LIFECYCLE) == timedelta(seconds=60)
        assert TimeoutConfig.resolve_timeout(OperationKind.READ) == DEFAULT_OPERATION_TIMEOUT

    def test_zero_is_accepted(self, clean_timeout_env) -> None:
        """Zero é um valor válido."""
        clean_timeout_env.setenv(ENV_READ_TIMEOUT_SECONDS, "0")

        assert TimeoutConfig.resolve_timeout(OperationKind.READ) == timedelta(0)

    @pytest.mark.parametrize("raw_value", ["", "   "])
    def test_blank_env_uses_default(self, clean_timeout_env, raw_value: str) -> None:
        """Env var vazia deve ser ignorada."""
        clean_timeout_env.setenv(ENV_READ_TIMEOUT_SECONDS, raw_value)

        assert TimeoutConfig.resolve_timeout(OperationKind.READ) == DEFAULT_OPERATION_TIMEOUT

    @pytest.mark.parametrize("raw_value", ["abc", "5s", "-1", "nan", "inf", "1e20"])
    def test_invalid_env_logs_warning_and_uses_default(
        self, clean_timeout_env, caplog: pytest.LogCaptureFixture, raw_value: str
    ) -> None:
        """Valores inválidos devem gerar warning e cair no default."""
        clean_timeout_env.setenv(ENV_READ_TIMEOUT_SECONDS, raw_value)

        with caplog.at_level(logging.WARNING, logger="clustered_cache.config"):
            resolved = TimeoutConfig.resolve_timeout(OperationKind.READ)

        assert resolved == DEFAULT_OPERATION_TIMEOUT
        assert ENV_READ_TIMEOUT_SECONDS in caplog.text


class TestFromEnv:
    """Testes para TimeoutConfig.from_env e builder_from_env."""

    def test_from_env_without_variables_equals_defaults(self, clean_timeout_env) -> None:
        """Sem env vars, deve ser igual a um TimeoutSet default."""
        assert TimeoutConfig.from_env() == TimeoutSet.builder().build()

    def test_from_env_reads_all_variables(self, clean_timeout_env) -> None:
        """Deve aplicar as três env vars."""
        clean_timeout_env.setenv(ENV_READ_TIMEOUT_SECONDS, "1")
        clean_timeout_env.setenv(ENV_MUTATIVE_TIMEOUT_SECONDS, "2")
        clean_timeout_env.setenv(ENV_LIFECYCLE_TIMEOUT_SECONDS, "3")

        timeouts = TimeoutConfig.from_env()

        assert timeouts.read_operation_timeout == timedelta(seconds=1)
        assert timeouts.mutative_operation_timeout == timedelta(seconds=2)
        assert timeouts.lifecycle_operation_timeout == timedelta(seconds=3)

    def test_setters_override_env_builder(self, clean_timeout_env) -> None:
        """Setters chamados depois devem prevalecer sobre o ambiente."""
        clean_timeout_env.setenv(ENV_READ_TIMEOUT_SECONDS, "10")

        timeouts = TimeoutConfig.builder_from_env().set_read_operation_timeout(timedelta(seconds=1)).build()

        assert timeouts.read_operation_timeout == timedelta(seconds=1)

    def test_builder_from_env_returns_builder(self, clean_timeout_env) -> None:
        """Deve retornar um TimeoutSet.Builder."""
        assert isinstance(TimeoutConfig.builder_from_env(), TimeoutSet.Builder)
