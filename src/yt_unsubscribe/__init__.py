"""Bulk unsubscribe automation for YouTube channel subscriptions."""

__version__ = "0.1.0"
