import pytest

from e1sizing.config import Settings, load_settings


def test_defaults_when_env_unset(monkeypatch):
    for name in ("E1SIZING_CHANNELS_MAX", "E1SIZING_CHANNELS_PER_TRUNK", "E1SIZING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == Settings(channels_max=10_000, channels_per_trunk=30, log_level="WARNING")


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("E1SIZING_CHANNELS_MAX", "500")
    monkeypatch.setenv("E1SIZING_CHANNELS_PER_TRUNK", "24")
    monkeypatch.setenv("E1SIZING_LOG_LEVEL", "debug")

    s = load_settings()
    assert s.channels_max == 500
    assert s.channels_per_trunk == 24
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["abc", "0", "-3"])
def test_bad_channels_max(monkeypatch, value):
    monkeypatch.setenv("E1SIZING_CHANNELS_MAX", value)
    with pytest.raises(RuntimeError, match="E1SIZING_CHANNELS_MAX"):
        load_settings()


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("E1SIZING_LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError):
        load_settings()

