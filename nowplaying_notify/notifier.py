# nowplaying_notify/notifier.py
import threading
from typing import Callable, List, Optional, Tuple

from .dbus_notify import (
    NotificationsConnection,
    connect_to_notifications,
    get_capabilities,
    send_notification,
)
from .debug import debug_log
from .errors import NotificationTransportError
from .formatter import format_notification
from .models import Options, PlaybackState, TrackInfo, default_options


class Notifier:
    """
    Shows "now playing" desktop notifications, once per track.

    Construction connects to the notification daemon and raises
    NotificationsUnavailable if it cannot be reached. Calls are serialized,
    so one instance may be shared between threads.
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        connect: Callable[[], NotificationsConnection] = connect_to_notifications,
    ):
        self.options = options or default_options()
        self._lock = threading.RLock()
        self._conn = connect()
        self._last_track_key: Optional[Tuple[str, str, str]] = None
        self._replace_id = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def replace_id(self) -> int:
        if not self.options.replace_existing:
            return 0
        return self._replace_id

    def notify(self, track: Optional[TrackInfo], state: PlaybackState) -> bool:
        """Notify if the track changed. Returns True when a notification was sent."""
        if track is None:
            return False

        # Nothing playing
        if track.is_empty:
            debug_log("Skipped notification: nothing playing")
            return False

        if state == PlaybackState.PAUSED and not self.options.notify_on_pause:
            debug_log(f"Skipped notification: paused on {track.title!r}")
            return False

        with self._lock:
            track_key = track.identity
            if track_key == self._last_track_key:
                debug_log(f"Skipped notification: {track.title!r} already shown")
                return False

            # Committed before sending: a failed send is not retried for the same track.
            self._last_track_key = track_key
            self._show(track, state)
            return True

    def notify_now(self, track: Optional[TrackInfo], state: PlaybackState) -> bool:
        """Notify without deduplication or pause suppression."""
        if track is None:
            return False
        with self._lock:
            self._show(track, state)
            return True

    def get_capabilities(self) -> List[str]:
        with self._lock:
            return get_capabilities(self._conn)

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _show(self, track: TrackInfo, state: PlaybackState) -> None:
        args = format_notification(track, state, self.options)
        try:
            notification_id = send_notification(self._conn, args, self.replace_id)
        except NotificationTransportError as e:
            debug_log(f"Notification failed for {track.title!r}: {e}")
            raise

        if self.options.replace_existing:
            self._replace_id = notification_id
        debug_log(f"Notified ({state.value}): {args.summary} [{notification_id}]")
