# nowplaying_notify/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

DEFAULT_ICON = "media-playback-start"
DEFAULT_TIMEOUT_MS = 5000


class PlaybackState(str, Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"

    @classmethod
    def parse(cls, text: str) -> "PlaybackState":
        value = (text or "").strip().lower()
        for state in cls:
            if state.value.lower() == value:
                return state
        return cls.STOPPED


@dataclass(frozen=True)
class TrackInfo:
    title: str = ""
    artist: str = ""
    album: str = ""
    station: str = ""
    image_url: str = ""
    duration: float = 0.0  # seconds, 0 if unknown

    @property
    def identity(self) -> Tuple[str, str, str]:
        return (self.title, self.artist, self.album)

    @property
    def is_empty(self) -> bool:
        return not self.title and not self.artist


@dataclass(frozen=True)
class Options:
    app_name: str = ""
    icon: str = DEFAULT_ICON
    timeout: int = DEFAULT_TIMEOUT_MS  # -1 = daemon default, 0 = never expire
    notify_on_pause: bool = False
    replace_existing: bool = True

    def __post_init__(self):
        if not INT32_MIN <= int(self.timeout) <= INT32_MAX:
            raise ValueError(f"timeout out of int32 range: {self.timeout}")


def default_options(app_name: str = "") -> Options:
    return Options(app_name=app_name)


@dataclass(frozen=True)
class NowPlaying:
    track: TrackInfo
    state: PlaybackState
