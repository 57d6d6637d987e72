import os

_MODULES_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Dotted path of the settings module for APP_ENV (development when unset or unknown)."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _MODULES_BY_ENV.get(env, "config.development")
