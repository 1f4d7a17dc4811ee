# nowplaying_notify/music_linux.py
import subprocess
from typing import Optional

from .models import NowPlaying, PlaybackState, TrackInfo

# Unit separator: does not show up in tags.
SEP = "\x1f"

PLAYERCTL_FORMAT = SEP.join([
    "{{status}}",
    "{{title}}",
    "{{artist}}",
    "{{album}}",
    "{{mpris:length}}",
    "{{mpris:artUrl}}",
])


def _to_seconds(micros: str) -> float:
    try:
        return float(micros) / 1_000_000.0
    except Exception:
        return 0.0


def parse_metadata(out: str) -> Optional[NowPlaying]:
    parts = out.rstrip("\n").split(SEP)
    if len(parts) < 4:
        return None

    state = PlaybackState.parse(parts[0])
    if state == PlaybackState.STOPPED:
        return None

    track = TrackInfo(
        title=parts[1].strip(),
        artist=parts[2].strip(),
        album=parts[3].strip(),
        duration=_to_seconds(parts[4]) if len(parts) > 4 else 0.0,
        image_url=parts[5].strip() if len(parts) > 5 else "",
    )
    return NowPlaying(track=track, state=state)


def get_now_playing() -> Optional[NowPlaying]:
    try:
        out = subprocess.check_output(
            ["playerctl", "metadata", "--format", PLAYERCTL_FORMAT],
            text=True,
            stderr=subprocess.DEVNULL,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        # playerctl missing, no players, or hung
        return None

    return parse_metadata(out)
