import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default=None):
    # Process environment wins over env.yaml
    value = os.environ.get(key)
    if value is not None:
        return value
    return data.get(key, default)


def _bool(key, default=False) -> bool:
    value = _get(key, default)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _int(key, default: int) -> int:
    try:
        return int(_get(key, default))
    except (TypeError, ValueError):
        return default


def _list(key, default):
    value = _get(key, default)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


class ApplicationConfig:
    DB_URI = _get("DB_URI")
    API_PORT = _int("API_PORT", 3000)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _list("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = _bool("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = _bool("ENABLE_LOGGING_MIDDLEWARE", True)
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = _int("JWT_EXPIRE_MINUTES", 60)
    SENDGRID_API_KEY = _get("SENDGRID_API_KEY", "")
    SENDGRID_FROM_EMAIL = _get("SENDGRID_FROM_EMAIL", "")
    SENDGRID_API_URL = _get("SENDGRID_API_URL", "https://api.sendgrid.com/v3/mail/send")
    NOTIFICATION_TIMEOUT_SECONDS = _int("NOTIFICATION_TIMEOUT_SECONDS", 10)
    FRONTEND_URL = str(_get("FRONTEND_URL", "http://localhost:5500")).rstrip("/")
    RESET_TOKEN_TTL_MINUTES = _int("RESET_TOKEN_TTL_MINUTES", 30)
    RESET_TOKEN_SWEEP_INTERVAL_SECONDS = _int("RESET_TOKEN_SWEEP_INTERVAL_SECONDS", 300)
    EXPOSE_RESET_TOKEN = _bool("EXPOSE_RESET_TOKEN", False)
    SEED_DEFAULT_USER = _bool("SEED_DEFAULT_USER", False)
    SEED_USER_EMAIL = _get("SEED_USER_EMAIL", "test@test.com")
    SEED_USER_PASSWORD = _get("SEED_USER_PASSWORD", "123456")
    SEED_USER_NAME = _get("SEED_USER_NAME", "Test User")
