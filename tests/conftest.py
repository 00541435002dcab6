"""Shared test fixtures for yt_unsubscribe tests."""

from typing import Callable
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import ElementHandle

from yt_unsubscribe.core.config import Credentials, PacingConfig, SelectorConfig, Settings
from yt_unsubscribe.core.pacer import Pacer
from yt_unsubscribe.models.snapshot import ActionableElement, Snapshot


@pytest.fixture
def sleeps() -> list[float]:
    """Seconds passed to the pacer's sleep function, in call order."""
    return []


@pytest.fixture
def pacer(sleeps: list[float]) -> Pacer:
    return Pacer(PacingConfig(), sleep=sleeps.append)


@pytest.fixture
def selectors() -> SelectorConfig:
    return SelectorConfig()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(email="someone@example.com", password="hunter2")


@pytest.fixture
def settings(credentials: Credentials) -> Settings:
    return Settings(credentials=credentials)


@pytest.fixture
def make_handle() -> Callable[..., MagicMock]:
    """Factory for element handles with a given label."""

    def _make(label: str = "Subscribed", attached: bool = True) -> MagicMock:
        handle = MagicMock(spec=ElementHandle)
        handle.text_content.return_value = label
        handle.evaluate.return_value = attached
        return handle

    return _make


@pytest.fixture
def make_snapshot() -> Callable[[list[MagicMock]], Snapshot]:
    def _make(handles: list[MagicMock]) -> Snapshot:
        return Snapshot(
            elements=tuple(
                ActionableElement(handle=h, ordinal=i) for i, h in enumerate(handles, start=1)
            )
        )

    return _make
