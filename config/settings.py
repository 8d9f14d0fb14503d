"""
Django settings for thbtext.

Uses django-environ for 12-factor configuration via .env file.
"""

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, ["localhost", "127.0.0.1"]),
)

# Read .env file if it exists (dev convenience)
environ.Env.read_env(BASE_DIR / ".env")

SECRET_KEY = env("SECRET_KEY", default="thbtext-insecure-dev-key")
DEBUG = env("DEBUG")
ALLOWED_HOSTS = env("ALLOWED_HOSTS")

INSTALLED_APPS = [
    # Local apps
    "bahttext",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
    },
]

# Internationalisation — Thai locale
LANGUAGE_CODE = "th"
TIME_ZONE = "Asia/Bangkok"
USE_I18N = True
USE_TZ = True

# Baht text conversion
# Rounding mode for amounts with more than two fractional digits:
# nearest | toward_zero | away_from_zero
BAHTTEXT_ROUNDING_MODE = env("BAHTTEXT_ROUNDING_MODE", default="nearest")
# Let satang that round to 100 carry into baht (100.995 → 101 baht)
BAHTTEXT_ALLOW_OVERFLOW = env.bool("BAHTTEXT_ALLOW_OVERFLOW", default=False)
# Log a warning when satang are clamped at 99 instead of carried
BAHTTEXT_WARN_ON_CLAMP = env.bool("BAHTTEXT_WARN_ON_CLAMP", default=True)
BAHTTEXT_MAX_INTEGER_DIGITS = env.int("BAHTTEXT_MAX_INTEGER_DIGITS", default=19)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "bahttext": {
            "handlers": ["console"],
            "level": env("BAHTTEXT_LOG_LEVEL", default="WARNING"),
        },
    },
}
