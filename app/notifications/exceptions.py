"""Notification exceptions"""


class NotificationError(Exception):
    """Raised when chart rendering or email dispatch fails. Never surfaced to submitters."""
