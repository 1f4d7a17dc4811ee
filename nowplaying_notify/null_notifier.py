# nowplaying_notify/null_notifier.py
from typing import List, Optional, Union

from .debug import debug_log
from .errors import NotificationsUnavailable
from .models import Options, PlaybackState, TrackInfo
from .notifier import Notifier


class NullNotifier:
    """Stand-in for hosts without a reachable notification daemon."""

    def __init__(self, options: Optional[Options] = None):
        self.options = options

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def notify(self, track: Optional[TrackInfo], state: PlaybackState) -> bool:
        return False

    def notify_now(self, track: Optional[TrackInfo], state: PlaybackState) -> bool:
        return False

    def get_capabilities(self) -> List[str]:
        return []

    def close(self) -> None:
        pass


def open_notifier(options: Optional[Options] = None) -> Union[Notifier, NullNotifier]:
    try:
        return Notifier(options)
    except NotificationsUnavailable as e:
        debug_log(f"Desktop notifications disabled: {e}")
        return NullNotifier(options)
