# nowplaying_notify/debug.py
import os
import time
from pathlib import Path


_DEBUG = os.getenv("NPN_DEBUG") == "1"


def _log_path() -> Path:
    state_home = os.getenv("XDG_STATE_HOME") or str(Path.home() / ".local" / "state")
    return Path(state_home) / "now-playing-notify" / "debug.log"


def debug_log(message: str) -> None:
    if not _DEBUG:
        return

    try:
        ts = time.strftime("%Y-%m-%d %H:%M:%S")
    except Exception:
        ts = "unknown-time"

    line = f"[{ts}] {message}\n"
    try:
        log_path = _log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as f:
            f.write(line)
    except Exception:
        pass

    try:
        print(f"[DEBUG] {message}")
    except Exception:
        pass
