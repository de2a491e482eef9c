import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("prod", "config.production"),
        ("Production", "config.production"),
        ("test", "config.testing"),
        ("staging", "config.development"),
    ],
)
def test_explicit_env(env, expected):
    assert get_settings_module(env) == expected


def test_env_variable(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"
