"""
Environment-backed settings.

Values are read on each call so tests can patch the environment freely.
A local `.env` file is loaded once, without overriding real variables.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def db_fail_fast() -> bool:
    return env_bool("DB_FAIL_FAST", False)


def db_pool_max_size() -> int:
    return max(1, env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout() -> int:
    return env_int("DB_COMMAND_TIMEOUT", 30)


def app_host() -> str:
    return env_str("APP_HOST", "0.0.0.0")


def app_port() -> int:
    return env_int("APP_PORT", 3000)


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def api_message() -> str:
    return env_str("API_MESSAGE", "API para Achados e Perdidos")


def api_author() -> str:
    return env_str("API_AUTHOR", "João Pedro Almeida Caldeira")


def bcrypt_rounds() -> int:
    # bcrypt accepts 4..31
    return min(31, max(4, env_int("BCRYPT_ROUNDS", 12)))
