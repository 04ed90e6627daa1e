import dj_database_url

from .base import *  # noqa: F403

# ── Core ──────────────────────────────────────────────────────────────────────

DEBUG = False

# ALLOWED_HOSTS is already populated from the ALLOWED_HOSTS env var in base.py.

CSRF_TRUSTED_ORIGINS = get_list("CSRF_TRUSTED_ORIGINS", [])  # noqa: F405

# ── Security ──────────────────────────────────────────────────────────────────

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = True
SECURE_HSTS_SECONDS = 3600
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ── Database ──────────────────────────────────────────────────────────────────
# DATABASE_URL wins when present; otherwise the POSTGRES_* vars from base.py.
# Connections are not kept across requests unless DB_CONN_MAX_AGE is raised.

_database_url = get_env("DATABASE_URL")  # noqa: F405
if _database_url:
    DATABASES = {  # noqa: F405
        "default": dj_database_url.parse(
            _database_url,
            conn_max_age=DB_CONN_MAX_AGE,  # noqa: F405
            conn_health_checks=DB_CONN_MAX_AGE > 0,  # noqa: F405
        )
    }

# ── Static files (Whitenoise) ─────────────────────────────────────────────────

STATIC_ROOT = BASE_DIR / "staticfiles"  # noqa: F405

MIDDLEWARE = [  # noqa: F405
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_htmx.middleware.HtmxMiddleware",
]

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# ── Logging ───────────────────────────────────────────────────────────────────

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        }
    },
    "root": {"handlers": ["console"], "level": "INFO"},
    "loggers": {
        "django": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "apps.players": {
            "handlers": ["console"],
            "level": get_env("PLAYERS_LOG_LEVEL", "INFO"),  # noqa: F405
            "propagate": False,
        },
    },
}
