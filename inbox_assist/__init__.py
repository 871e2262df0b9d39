"""Inbox assist: inbox-cleaning wizard and reply tracker service."""

__version__ = "0.1.0"
