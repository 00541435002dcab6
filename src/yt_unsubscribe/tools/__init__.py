"""Page-adapter tools over the Playwright sync API."""

from yt_unsubscribe.tools.actions import click, navigate, press, scroll_to_bottom, type_

__all__ = [
    "click",
    "navigate",
    "press",
    "scroll_to_bottom",
    "type_",
]
