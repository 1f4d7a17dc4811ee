# nowplaying_notify/config.py
import os
from typing import Mapping, Optional

from .debug import debug_log
from .models import DEFAULT_ICON, DEFAULT_TIMEOUT_MS, INT32_MAX, INT32_MIN, Options

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _timeout(env: Mapping[str, str]) -> int:
    raw = (env.get("NPN_TIMEOUT") or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        debug_log(f"Ignoring NPN_TIMEOUT={raw!r}: not an integer")
        return DEFAULT_TIMEOUT_MS
    if not INT32_MIN <= value <= INT32_MAX:
        debug_log(f"Ignoring NPN_TIMEOUT={raw!r}: out of range")
        return DEFAULT_TIMEOUT_MS
    return value


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> Options:
    env = os.environ if environ is None else environ
    return Options(
        app_name=env.get("NPN_APP_NAME", ""),
        icon=env.get("NPN_ICON") or DEFAULT_ICON,
        timeout=_timeout(env),
        notify_on_pause=_flag(env, "NPN_NOTIFY_ON_PAUSE", False),
        replace_existing=_flag(env, "NPN_REPLACE", True),
    )
