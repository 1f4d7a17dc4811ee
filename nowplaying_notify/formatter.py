# nowplaying_notify/formatter.py
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .models import DEFAULT_ICON, Options, PlaybackState, TrackInfo

DEFAULT_APP_NAME = "Music Player"
NOW_PLAYING = "Now Playing"
PAUSE_PREFIX = "\u23f8 "  # ⏸ + space


@dataclass(frozen=True)
class NotificationArgs:
    app_name: str
    icon: str
    summary: str
    body: str
    timeout: int
    actions: Tuple[str, ...] = ()
    hints: Dict[str, object] = field(default_factory=dict)


def _body(track: TrackInfo) -> str:
    if track.artist and track.album:
        return f"{track.artist}\n{track.album}"
    if track.artist:
        return track.artist
    if track.station:
        return track.station
    return NOW_PLAYING


def format_notification(track: TrackInfo, state: PlaybackState, options: Options) -> NotificationArgs:
    """
    Build the Notify arguments for a track.

    Summary is the title; the body carries artist and album on two lines,
    falling back to the station name for radio streams.
    """
    body = _body(track)
    if state == PlaybackState.PAUSED:
        body = PAUSE_PREFIX + body

    return NotificationArgs(
        app_name=options.app_name or DEFAULT_APP_NAME,
        icon=options.icon or DEFAULT_ICON,
        summary=track.title or NOW_PLAYING,
        body=body,
        timeout=options.timeout,
    )
