"""Core components: configuration, pacing, loading, sequencing and sessions."""

from yt_unsubscribe.core.browser import launch_persistent_context, open_page
from yt_unsubscribe.core.collector import collect
from yt_unsubscribe.core.config import Credentials, PacingConfig, SelectorConfig, Settings
from yt_unsubscribe.core.errors import (
    AuthenticationError,
    ConfigError,
    LoadTimeoutExceeded,
    MissingCredentialsError,
    NavigationError,
    UnsubscribeError,
)
from yt_unsubscribe.core.loader import ListLoader
from yt_unsubscribe.core.pacer import Duration, Pacer
from yt_unsubscribe.core.sequencer import UnsubscribeSequencer
from yt_unsubscribe.core.session import SessionOrchestrator, run_session

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "Credentials",
    "Duration",
    "ListLoader",
    "LoadTimeoutExceeded",
    "MissingCredentialsError",
    "NavigationError",
    "Pacer",
    "PacingConfig",
    "SelectorConfig",
    "SessionOrchestrator",
    "Settings",
    "UnsubscribeError",
    "UnsubscribeSequencer",
    "collect",
    "launch_persistent_context",
    "open_page",
    "run_session",
]
