# posoffice/config.py
import os
from dotenv import load_dotenv

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(BASE_DIR, ".env"))

INSTANCE_DIR = os.path.join(BASE_DIR, "instance")


def _env(key: str, default=None):
    v = os.getenv(key)
    return v if v not in (None, "", "None") else default


def _env_int(key: str, default: int) -> int:
    v = _env(key)
    try:
        return int(v) if v is not None else default
    except ValueError:
        return default


def _env_list(key: str, default: list[str]) -> list[str]:
    v = _env(key)
    if not v:
        return default
    return [part.strip() for part in v.split(",") if part.strip()]


def _resolve_sqlite_uri(db_url: str | None) -> str:
    if not db_url:
        db_path = os.path.join(INSTANCE_DIR, "pos.db")
        os.makedirs(os.path.dirname(db_path), exist_ok=True)
        return "sqlite:///" + db_path.replace("\\", "/")

    if db_url.startswith("sqlite:///"):
        raw_path = db_url.replace("sqlite:///", "", 1)
        if raw_path == ":memory:":
            return db_url
        if not os.path.isabs(raw_path):
            raw_path = os.path.join(BASE_DIR, raw_path)
        db_path = os.path.normpath(raw_path)
        os.makedirs(os.path.dirname(db_path), exist_ok=True)
        return "sqlite:///" + db_path.replace("\\", "/")

    return db_url


def _engine_options(db_uri: str, pool_size: int) -> dict:
    # SQLite uses its own pool classes, sizing only applies to server databases
    if db_uri.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": 0,
        "pool_pre_ping": True,
    }


class Config:
    SECRET_KEY = _env("SECRET_KEY", "dev-please-change-me")

    SQLALCHEMY_DATABASE_URI = _resolve_sqlite_uri(_env("DATABASE_URL"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DB_POOL_SIZE = _env_int("DB_POOL_SIZE", 10)
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI, DB_POOL_SIZE)

    # Signed bearer tokens for the admin
    AUTH_TOKEN_SALT = _env("AUTH_TOKEN_SALT", "pos-admin-token")
    AUTH_TOKEN_MAX_AGE = _env_int("AUTH_TOKEN_MAX_AGE", 6 * 60 * 60)

    CORS_ORIGINS = _env_list("CORS_ORIGINS", ["http://localhost:3000"])

    PRODUCTS_PAGE_SIZE = _env_int("PRODUCTS_PAGE_SIZE", 10)
    TOP_PRODUCTS_LIMIT = _env_int("TOP_PRODUCTS_LIMIT", 5)
    SECRET_MASK_LENGTH = _env_int("SECRET_MASK_LENGTH", 8)


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    BCRYPT_LOG_ROUNDS = 4
