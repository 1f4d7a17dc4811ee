import pytest

from nowplaying_notify.models import Options, PlaybackState, TrackInfo, default_options


def test_identity_excludes_station_image_and_duration():
    a = TrackInfo(title="A", artist="B", album="C", station="S1", image_url="x", duration=1.0)
    b = TrackInfo(title="A", artist="B", album="C", station="S2", image_url="y", duration=2.0)
    assert a.identity == b.identity == ("A", "B", "C")


def test_identity_has_no_separator_collisions():
    assert TrackInfo(title="a-b", artist="c").identity != TrackInfo(title="a", artist="b-c").identity


def test_is_empty_needs_title_and_artist_missing():
    assert TrackInfo().is_empty
    assert TrackInfo(album="C", station="S").is_empty
    assert not TrackInfo(title="A").is_empty
    assert not TrackInfo(artist="B").is_empty


def test_default_options():
    options = default_options("Foo")
    assert options == Options(
        app_name="Foo",
        icon="media-playback-start",
        timeout=5000,
        notify_on_pause=False,
        replace_existing=True,
    )


def test_timeout_must_fit_int32():
    with pytest.raises(ValueError):
        Options(timeout=2 ** 31)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Playing", PlaybackState.PLAYING),
        ("paused", PlaybackState.PAUSED),
        (" Stopped\n", PlaybackState.STOPPED),
        ("", PlaybackState.STOPPED),
        ("buffering", PlaybackState.STOPPED),
    ],
)
def test_playback_state_parse(text, expected):
    assert PlaybackState.parse(text) is expected
