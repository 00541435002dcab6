"""Exception hierarchy for fatal run errors.

Per-item problems are never raised past the sequencer; these exceptions
are for conditions that abort the whole run.
"""


class UnsubscribeError(Exception):
    """Base class for fatal errors that abort a run."""


class ConfigError(UnsubscribeError):
    """Raised when configuration is malformed."""


class MissingCredentialsError(ConfigError):
    """Raised when required credentials are not supplied."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )


class AuthenticationError(UnsubscribeError):
    """Raised when the sign-in flow does not complete."""


class NavigationError(UnsubscribeError):
    """Raised when a required page cannot be loaded."""


class LoadTimeoutExceeded(UnsubscribeError):
    """Raised when the list never stops growing within the poll budget."""

    def __init__(self, polls: int, last_count: int) -> None:
        self.polls = polls
        self.last_count = last_count
        super().__init__(
            f"List did not stabilize after {polls} scroll polls "
            f"(last count: {last_count})"
        )
