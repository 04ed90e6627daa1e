"""
Local development settings. Uses PostgreSQL when POSTGRES_HOST is set,
otherwise a SQLite file next to manage.py.
"""
import dj_database_url

from .base import *  # noqa: F403

DEBUG = True
ALLOWED_HOSTS = ["*"]

if get_env("POSTGRES_HOST") is None:  # noqa: F405
    DATABASES = {  # noqa: F405
        "default": dj_database_url.parse(
            get_env("DATABASE_URL", f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),  # noqa: F405
            conn_max_age=DB_CONN_MAX_AGE,  # noqa: F405
        )
    }

LOGGING["loggers"]["apps.players"]["level"] = get_env("PLAYERS_LOG_LEVEL", "DEBUG")  # noqa: F405
