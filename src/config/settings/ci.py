"""
CI / test settings — imports all production config but disables the HTTPS
redirect so Django's test client (which speaks plain HTTP) can reach views.
Runs against SQLite unless DATABASE_URL points somewhere else.
Use via: DJANGO_SETTINGS_MODULE=config.settings.ci
"""
import dj_database_url

from .production import *  # noqa: F403

SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

DATABASES = {  # noqa: F405
    "default": dj_database_url.parse(
        get_env("DATABASE_URL", f"sqlite:///{BASE_DIR / 'ci.sqlite3'}"),  # noqa: F405
    )
}

# CompressedManifestStaticFilesStorage requires collectstatic to have been run
# (it reads staticfiles.json). Use the plain storage backend in tests instead.
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
