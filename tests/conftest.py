import pytest

from nowplaying_notify.dbus_notify import connect_to_notifications
from nowplaying_notify.models import Options
from nowplaying_notify.notifier import Notifier

NOTIFY_FIELDS = ("app_name", "replace_id", "icon", "summary", "body", "actions", "hints", "timeout")


class FakeDaemon:
    """Plays both the session bus and the Notifications proxy object."""

    def __init__(self, capabilities=("actions", "body", "body-markup"), first_id=41):
        self.capabilities = list(capabilities)
        self.next_id = first_id
        self.calls = []
        self.signatures = []
        self.lookups = []
        self.notify_error = None
        self.notify_reply = None
        self.caps_error = None
        self.close_count = 0

    # bus
    def get_object(self, bus_name, path, introspect=True):
        self.lookups.append((bus_name, path))
        return self

    def close(self):
        self.close_count += 1

    # proxy
    def get_dbus_method(self, name, dbus_interface=None):
        self.interface = dbus_interface
        return getattr(self, f"_{name}")

    def _Notify(self, *args, signature=None):
        if self.notify_error is not None:
            raise self.notify_error
        self.calls.append(dict(zip(NOTIFY_FIELDS, args)))
        self.signatures.append(signature)
        if self.notify_reply is not None:
            return self.notify_reply
        notification_id = self.next_id
        self.next_id += 1
        return notification_id

    def _GetCapabilities(self):
        if self.caps_error is not None:
            raise self.caps_error
        return list(self.capabilities)


@pytest.fixture
def daemon():
    return FakeDaemon()


@pytest.fixture
def make_notifier(daemon):
    def _make(**kwargs):
        options = Options(**kwargs)
        return Notifier(options, connect=lambda: connect_to_notifications(lambda: daemon))

    return _make
