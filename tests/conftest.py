"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from atomchess.variant.atomic import Atomic
from atomchess.variant.registry import ENV_VARIANT
from atomchess.variant.situation import Situation
from atomchess.variant.standard import Standard


@pytest.fixture(autouse=True)
def _reset_variant_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the caller's environment from choosing the default variant."""
    monkeypatch.delenv(ENV_VARIANT, raising=False)
    yield


@pytest.fixture
def atomic() -> Atomic:
    return Atomic()


@pytest.fixture
def standard() -> Standard:
    return Standard()


@pytest.fixture
def situation() -> Callable[[str], Situation]:
    """Factory building a :class:`Situation` from FEN."""
    return Situation.from_fen
