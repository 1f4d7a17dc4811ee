# nowplaying_notify/errors.py


class NotifierError(Exception):
    pass


class NotificationsUnavailable(NotifierError):
    """The notification daemon could not be reached over the session bus."""


class NotificationTransportError(NotifierError):
    """A single call to the notification daemon failed."""
