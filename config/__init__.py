import os

_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module(env=None) -> str:
    # APP_ENV picks the settings module; anything unrecognised means development
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return f"config.{_ALIASES.get(env, 'development')}"
