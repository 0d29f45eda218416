"""Configuração de fixtures para testes."""

from datetime import timedelta

import pytest

from clustered_cache.constants import (
    ENV_LIFECYCLE_TIMEOUT_SECONDS,
    ENV_MUTATIVE_TIMEOUT_SECONDS,
    ENV_READ_TIMEOUT_SECONDS,
)


@pytest.fixture
def custom_durations() -> tuple[timedelta, timedelta, timedelta]:
    """Durações distintas para leitura, mutação e ciclo de vida."""
    return timedelta(seconds=1), timedelta(milliseconds=2500), timedelta(minutes=2)


@pytest.fixture
def clean_timeout_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove variáveis de ambiente de timeout do processo."""
    for name in (ENV_READ_TIMEOUT_SECONDS, ENV_MUTATIVE_TIMEOUT_SECONDS, ENV_LIFECYCLE_TIMEOUT_SECONDS):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
