from .base import *  # noqa
import sys

import dj_database_url
from decouple import config

DEBUG = False
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = True
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# Trust X-Forwarded-Proto header from the reverse proxy that terminates SSL
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

database_url = config("DATABASE_URL", default="")
if not database_url:
    print("ERROR: DATABASE_URL is not set", file=sys.stderr)
    sys.exit(1)

DATABASES = {
    "default": dj_database_url.parse(  # type: ignore[dict-item]
        database_url,
        conn_max_age=600,
        conn_health_checks=True,
    )
}

# Static files served by whitenoise behind the proxy
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")  # noqa: F405
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}
