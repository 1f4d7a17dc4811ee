# nowplaying_notify/dbus_notify.py
from typing import Callable, List, Optional

from .debug import debug_log
from .errors import NotificationTransportError, NotificationsUnavailable
from .formatter import NotificationArgs

try:
    import dbus
except Exception:  # dbus-python not installed or not on Linux
    dbus = None


NOTIFICATIONS_BUS_NAME = "org.freedesktop.Notifications"
NOTIFICATIONS_INTERFACE = "org.freedesktop.Notifications"
NOTIFICATIONS_PATH = "/org/freedesktop/Notifications"

# app_name, replaces_id, app_icon, summary, body, actions, hints, expire_timeout
NOTIFY_SIGNATURE = "susssasa{sv}i"

UINT32_MAX = 2 ** 32 - 1


def _open_session_bus():
    if dbus is None:
        raise RuntimeError("dbus-python is not available on this platform")
    # Private connection: closing it must not tear down the shared session bus.
    return dbus.SessionBus(private=True)


class NotificationsConnection:
    """Session bus connection to the notification daemon."""

    def __init__(self, bus):
        self._bus = bus
        self._proxy = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def method(self, name: str):
        if self._closed:
            raise NotificationTransportError("notification connection is closed")
        if self._proxy is None:
            self._proxy = self._bus.get_object(
                NOTIFICATIONS_BUS_NAME, NOTIFICATIONS_PATH, introspect=False
            )
        return self._proxy.get_dbus_method(name, NOTIFICATIONS_INTERFACE)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._proxy = None
        try:
            self._bus.close()
        except Exception as e:
            debug_log(f"Session bus close failed: {e}")


def probe(conn: NotificationsConnection) -> None:
    """Check the daemon answers GetCapabilities; raises NotificationsUnavailable."""
    try:
        conn.method("GetCapabilities")()
    except Exception as e:
        raise NotificationsUnavailable(f"D-Bus notifications not available: {e}") from e


def connect_to_notifications(
    bus_factory: Optional[Callable[[], object]] = None,
) -> NotificationsConnection:
    factory = bus_factory or _open_session_bus
    try:
        bus = factory()
    except Exception as e:
        debug_log(f"Session bus connect failed: {e}")
        raise NotificationsUnavailable(f"failed to connect to session bus: {e}") from e

    conn = NotificationsConnection(bus)
    try:
        probe(conn)
    except NotificationsUnavailable as e:
        debug_log(f"Notification daemon probe failed: {e}")
        conn.close()
        raise

    debug_log("Connected to org.freedesktop.Notifications")
    return conn


def _first_value(reply):
    if isinstance(reply, (tuple, list)):
        return reply[0] if reply else None
    return reply


def send_notification(conn: NotificationsConnection, args: NotificationArgs, replace_id: int = 0) -> int:
    """
    Create a notification, or replace the one identified by ``replace_id``.

    Returns the id the daemon assigned. 0 asks the daemon for a new one.
    """
    if not 0 <= replace_id <= UINT32_MAX:
        raise ValueError(f"replace id out of uint32 range: {replace_id}")

    try:
        notify = conn.method("Notify")
        reply = notify(
            args.app_name,
            replace_id,
            args.icon,
            args.summary,
            args.body,
            list(args.actions),
            dict(args.hints),
            args.timeout,
            signature=NOTIFY_SIGNATURE,
        )
    except NotificationTransportError:
        raise
    except Exception as e:
        raise NotificationTransportError(f"failed to show notification: {e}") from e

    value = _first_value(reply)
    if not _is_notification_id(value):
        raise NotificationTransportError(f"unexpected Notify reply: {reply!r}")
    return int(value)


def _is_notification_id(value) -> bool:
    # dbus.Boolean subclasses int, not bool
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if dbus is not None and isinstance(value, dbus.Boolean):
        return False
    return 0 <= value <= UINT32_MAX


def get_capabilities(conn: NotificationsConnection) -> List[str]:
    try:
        reply = conn.method("GetCapabilities")()
    except NotificationTransportError:
        raise
    except Exception as e:
        raise NotificationTransportError(f"failed to get capabilities: {e}") from e

    if not reply:
        return []
    if isinstance(reply, str):
        raise NotificationTransportError(f"unexpected GetCapabilities reply: {reply!r}")
    try:
        return [str(cap) for cap in reply]
    except TypeError as e:
        raise NotificationTransportError(f"unexpected GetCapabilities reply: {reply!r}") from e
