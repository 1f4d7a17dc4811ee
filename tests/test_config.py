from nowplaying_notify.config import options_from_env
from nowplaying_notify.models import Options


def test_empty_environment_gives_defaults():
    assert options_from_env({}) == Options()


def test_reads_every_variable():
    options = options_from_env({
        "NPN_APP_NAME": "Foo",
        "NPN_ICON": "audio-x-generic",
        "NPN_TIMEOUT": "-1",
        "NPN_NOTIFY_ON_PAUSE": "yes",
        "NPN_REPLACE": "0",
    })
    assert options == Options(
        app_name="Foo",
        icon="audio-x-generic",
        timeout=-1,
        notify_on_pause=True,
        replace_existing=False,
    )


def test_bad_timeout_falls_back_to_default():
    assert options_from_env({"NPN_TIMEOUT": "soon"}).timeout == 5000
    assert options_from_env({"NPN_TIMEOUT": str(2 ** 40)}).timeout == 5000


def test_blank_flags_keep_defaults():
    options = options_from_env({"NPN_NOTIFY_ON_PAUSE": " ", "NPN_REPLACE": ""})
    assert options.notify_on_pause is False
    assert options.replace_existing is True


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("NPN_APP_NAME", "FromEnv")
    assert options_from_env().app_name == "FromEnv"
