"""List loader for lazily rendered lists.

The subscriptions page only renders rows as the user scrolls. The loader
scrolls to the bottom, waits for the platform to fetch and render, and
counts rows again, until two consecutive counts agree.
"""

from playwright.sync_api import Page

from yt_unsubscribe.core.errors import LoadTimeoutExceeded
from yt_unsubscribe.core.logging import ErrorIds, logError, logEvent, logForDebugging
from yt_unsubscribe.core.pacer import Duration, Pacer
from yt_unsubscribe.tools.actions import scroll_to_bottom


class ListLoader:
    """Scrolls a page until its row count reaches a fixed point.

    Attributes:
        polls: Number of scroll-and-count polls made by the last load_all().
    """

    def __init__(
        self,
        pacer: Pacer,
        row_selector: str,
        max_polls: int | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            pacer: Pacer used for the settle delay after each scroll.
            row_selector: CSS selector of the rows being counted.
            max_polls: Optional bound on polls. None polls until stable.
        """
        self._pacer = pacer
        self._row_selector = row_selector
        self._max_polls = max_polls
        self.polls = 0

    def load_all(self, page: Page) -> int:
        """Scroll until no further rows are disclosed.

        Args:
            page: The Playwright Page showing the list.

        Returns:
            The final, stable row count.

        Raises:
            LoadTimeoutExceeded: If max_polls is set and reached first.
        """
        logForDebugging("Pre-loading all channels via scrolling...", level="info")
        previous_count = 0
        self.polls = 0

        while True:
            if self._max_polls is not None and self.polls >= self._max_polls:
                logError(
                    ErrorIds.LOAD_TIMEOUT,
                    "Scroll loading never stabilized",
                    extra={"polls": self.polls, "last_count": previous_count},
                )
                raise LoadTimeoutExceeded(self.polls, previous_count)

            current_count = scroll_to_bottom(page, self._row_selector)
            self.polls += 1

            # Rows arrive asynchronously after the scroll-triggered fetch
            self._pacer.wait(Duration.SETTLE)

            if current_count == previous_count:
                logEvent("list_loaded", {"rows": current_count, "polls": self.polls})
                logForDebugging(
                    f"Scrolling stopped: Reached the end with {current_count} channels loaded.",
                    level="info",
                )
                return current_count

            logForDebugging(f"Channels loaded so far: {current_count}", level="info")
            previous_count = current_count
