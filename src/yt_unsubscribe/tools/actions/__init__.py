"""Page actions used by the login flow, loader and sequencer."""

from yt_unsubscribe.tools.actions.click import click
from yt_unsubscribe.tools.actions.navigate import navigate
from yt_unsubscribe.tools.actions.press import press
from yt_unsubscribe.tools.actions.scroll import scroll_to_bottom
# Import from type.py but export as type_ to avoid shadowing built-in
from yt_unsubscribe.tools.actions.type import type_

__all__ = [
    "click",
    "navigate",
    "press",
    "scroll_to_bottom",
    "type_",
]
