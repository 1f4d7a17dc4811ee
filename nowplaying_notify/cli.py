# nowplaying_notify/cli.py
import sys
import time
from dataclasses import replace
from typing import Optional

import typer

from .config import options_from_env
from .debug import debug_log
from .errors import NotificationTransportError, NotificationsUnavailable
from .models import Options, PlaybackState, TrackInfo
from .notifier import Notifier
from .null_notifier import open_notifier

if sys.platform.startswith("linux"):
    from .music_linux import get_now_playing
else:
    get_now_playing = None


POLL_SECONDS = 5

app = typer.Typer(add_completion=False, help="Desktop notifications for the track that is playing.")


def _options(app_name: Optional[str]) -> Options:
    options = options_from_env()
    if app_name:
        options = replace(options, app_name=app_name)
    return options


def _connect(options: Options) -> Notifier:
    try:
        return Notifier(options)
    except NotificationsUnavailable as e:
        typer.echo(f"[Notify] {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def show(
    title: str = typer.Argument(..., help="Track title."),
    artist: str = typer.Option("", help="Artist name."),
    album: str = typer.Option("", help="Album name."),
    station: str = typer.Option("", help="Station name, used when there is no artist."),
    paused: bool = typer.Option(False, "--paused", help="Show the paused indicator."),
    app_name: Optional[str] = typer.Option(None, "--app-name", help="Override NPN_APP_NAME."),
):
    """Show one notification right away."""
    track = TrackInfo(title=title, artist=artist, album=album, station=station)
    state = PlaybackState.PAUSED if paused else PlaybackState.PLAYING

    with _connect(_options(app_name)) as notifier:
        try:
            notifier.notify_now(track, state)
        except NotificationTransportError as e:
            typer.echo(f"[Notify] {e}", err=True)
            raise typer.Exit(code=1)


@app.command()
def caps(app_name: Optional[str] = typer.Option(None, "--app-name", help="Override NPN_APP_NAME.")):
    """Print the notification daemon's capabilities."""
    with _connect(_options(app_name)) as notifier:
        try:
            capabilities = notifier.get_capabilities()
        except NotificationTransportError as e:
            typer.echo(f"[Notify] {e}", err=True)
            raise typer.Exit(code=1)

    for cap in capabilities:
        typer.echo(cap)


@app.command()
def watch(
    interval: float = typer.Option(POLL_SECONDS, "--interval", min=0.1, help="Seconds between polls."),
    once: bool = typer.Option(False, "--once", help="Poll a single time and exit."),
    app_name: Optional[str] = typer.Option(None, "--app-name", help="Override NPN_APP_NAME."),
):
    """Watch the active MPRIS player and notify on track changes."""
    if not get_now_playing:
        typer.echo("[Music] Unsupported OS: playerctl source needs Linux.", err=True)
        raise typer.Exit(code=1)

    notifier = open_notifier(_options(app_name))
    typer.echo("[Music] Watching MPRIS players… (Ctrl+C to stop)")

    try:
        while True:
            np = get_now_playing()
            if np is not None:
                try:
                    if notifier.notify(np.track, np.state):
                        typer.echo(f"[Notify] {np.state.value}: {np.track.title} — {np.track.artist}")
                except NotificationTransportError as e:
                    typer.echo(f"[Notify] Update failed: {e}", err=True)
                    debug_log(f"Update failed: {e}")

            if once:
                break
            time.sleep(interval)
    except KeyboardInterrupt:
        pass
    finally:
        notifier.close()
