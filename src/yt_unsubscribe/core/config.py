"""Configuration for bulk unsubscribe runs.

Settings are read from the environment (optionally seeded from a .env
file). Timing, selectors and credentials are kept in separate frozen
models so each component only receives what it needs.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from yt_unsubscribe.core.errors import ConfigError, MissingCredentialsError

EMAIL_ENV = "YT_EMAIL"
PASSWORD_ENV = "YT_PASSWORD"

HOME_URL = "https://www.youtube.com"
CHANNELS_URL = "https://www.youtube.com/feed/channels"


class PacingConfig(BaseModel):
    """Timing policy, in milliseconds.

    Attributes:
        short_ms: Delay after a click that opens UI (menu, dialog).
        long_ms: Stabilization delay after a state-changing action.
        scroll_settle_ms: Delay after each scroll before counting rows.
        click_timeout_ms: Timeout for clicking a snapshot element.
        login_timeout_ms: Timeout for the signed-in page to appear.
        max_scroll_polls: Upper bound on scroll polls; None is unbounded.
    """

    model_config = ConfigDict(frozen=True)

    short_ms: int = 500
    long_ms: int = 10000
    scroll_settle_ms: int = 3000
    click_timeout_ms: int = 5000
    login_timeout_ms: int = 15000
    max_scroll_polls: int | None = None

    @field_validator("short_ms", "long_ms", "scroll_settle_ms", "click_timeout_ms", "login_timeout_ms")
    @classmethod
    def must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"must be non-negative, got {v}")
        return v

    @field_validator("max_scroll_polls")
    @classmethod
    def must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v


class SelectorConfig(BaseModel):
    """CSS selectors and labels for the subscriptions page."""

    model_config = ConfigDict(frozen=True)

    sign_in_button: str = 'ytd-masthead button[aria-label="Sign in"]'
    email_input: str = 'input[type="email"]'
    password_input: str = 'input[type="password"]'
    signed_in_marker: str = "#guide-content"

    channel_row: str = "ytd-channel-renderer:not([hidden])"
    subscribe_button: str = (
        "ytd-channel-renderer:not([hidden]) "
        "ytd-subscribe-button-renderer button.yt-spec-button-shape-next"
    )
    menu_item: str = "tp-yt-paper-listbox ytd-menu-service-item-renderer"
    confirm_button: str = (
        'ytd-popup-container button[aria-label="Unsubscribe"]'
        ".yt-spec-button-shape-next--call-to-action"
    )

    subscribed_label: str = "Subscribed"
    unsubscribe_text: str = "Unsubscribe"


class Credentials(BaseModel):
    """Account credentials. Both fields are required and non-empty."""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"

    __str__ = __repr__


class Settings(BaseModel):
    """Top-level settings for a run."""

    model_config = ConfigDict(frozen=True)

    credentials: Credentials
    pacing: PacingConfig = PacingConfig()
    selectors: SelectorConfig = SelectorConfig()
    headless: bool = True
    user_data_dir: Path | None = None
    home_url: str = HOME_URL
    channels_url: str = CHANNELS_URL

    @classmethod
    def from_env(cls, env_file: str | Path | None = None, **overrides: object) -> "Settings":
        """Build settings from the environment.

        Args:
            env_file: Optional .env file to load first (existing variables win).
            **overrides: Field values that take precedence over the environment.

        Returns:
            A validated Settings instance.

        Raises:
            MissingCredentialsError: If YT_EMAIL or YT_PASSWORD is unset or empty.
            ConfigError: If a numeric or boolean override is malformed.
        """
        load_dotenv(env_file)
        credentials = load_credentials()

        pacing_values: dict[str, int | None] = {}
        for field, key in (
            ("short_ms", "UNSUB_SHORT_DELAY_MS"),
            ("long_ms", "UNSUB_LONG_DELAY_MS"),
            ("scroll_settle_ms", "UNSUB_SCROLL_SETTLE_MS"),
            ("click_timeout_ms", "UNSUB_CLICK_TIMEOUT_MS"),
            ("max_scroll_polls", "UNSUB_MAX_SCROLL_POLLS"),
        ):
            value = _env_int(key)
            if value is not None:
                pacing_values[field] = value

        max_polls = overrides.pop("max_scroll_polls", None)
        if max_polls is not None:
            pacing_values["max_scroll_polls"] = max_polls  # type: ignore[assignment]

        values: dict[str, object] = {"credentials": credentials}
        try:
            values["pacing"] = PacingConfig(**pacing_values)
        except ValueError as e:
            raise ConfigError(f"Invalid pacing configuration: {e}") from e

        headless = _env_bool("UNSUB_HEADLESS")
        if headless is not None:
            values["headless"] = headless

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def load_credentials() -> Credentials:
    """Read credentials from the environment.

    Raises:
        MissingCredentialsError: If either variable is unset or blank.
    """
    email = os.environ.get(EMAIL_ENV, "").strip()
    password = os.environ.get(PASSWORD_ENV, "")
    missing = [
        name for name, value in ((EMAIL_ENV, email), (PASSWORD_ENV, password)) if not value
    ]
    if missing:
        raise MissingCredentialsError(missing)
    return Credentials(email=email, password=password)


def _env_int(key: str) -> int | None:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from e


def _env_bool(key: str) -> bool | None:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "y", "on"):
        return True
    if value in ("0", "false", "no", "n", "off"):
        return False
    raise ConfigError(f"{key} must be a boolean, got {raw!r}")
