from pathlib import Path
import json
import os

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY",
    "django-insecure-installer-dev-key-change-me",
)
DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = ["127.0.0.1", "localhost", "testserver"]
CSRF_TRUSTED_ORIGINS = ["http://127.0.0.1", "http://localhost"]
CSRF_COOKIE_SECURE = False

# Application definition

INSTALLED_APPS = [
    'jazzmin',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'account.apps.AccountConfig',
    'installer.apps.InstallerConfig',
]


MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'installer.middleware.InitialSetupMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        "DIRS": [BASE_DIR / "templates"],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'


# Database
# https://docs.djangoproject.com/en/5.2/ref/settings/#databases

DB_ENGINE = os.environ.get('DB_ENGINE', 'sqlite')

if DB_ENGINE == "mysql":
    try:
        import MySQLdb  # noqa: F401
    except ImportError:
        import pymysql; pymysql.install_as_MySQLdb()

    DATABASES = {
        "default": {
            'ENGINE': 'django.db.backends.mysql',
            "NAME": os.environ.get("DB_NAME", "installer"),
            "USER": os.environ.get("DB_USER", "root"),
            "PASSWORD": os.environ.get("DB_PASSWORD", ""),
            "HOST": os.environ.get("DB_HOST", "127.0.0.1"),
            "PORT": os.environ.get("DB_PORT", "3306"),
            "OPTIONS": {
                "charset": "utf8mb4",
            },
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }


# Password validation
# https://docs.djangoproject.com/en/5.2/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]


# Internationalization
# https://docs.djangoproject.com/en/5.2/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True


# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/5.2/howto/static-files/

STATIC_URL = 'static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


LOGIN_URL = "admin:login"
LOGIN_REDIRECT_URL = "installer:done"


JAZZMIN_SETTINGS = {
    "site_title": "Config Installer Admin",
    "site_header": "Config Installer",
    "site_brand": "Config Installer",
}


SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"


MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"


# =========================
# INSTALLER
# =========================

# Site settings file rewritten by the installer (staging directory, install
# profile). Read once here so the rewritten values survive a restart.
SITE_SETTINGS_FILE = Path(
    os.environ.get("INSTALLER_SETTINGS_FILE", BASE_DIR / "sites" / "default" / "settings.json")
)


def _read_site_settings(path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f) or {}
    except FileNotFoundError:
        return {}


_site_settings = _read_site_settings(SITE_SETTINGS_FILE)

DEFAULT_STAGING_DIRECTORY = os.environ.get(
    "CONFIG_STAGING_DIRECTORY",
    str(BASE_DIR / "sites" / "default" / "files" / "config" / "staging"),
)

CONFIG_DIRECTORIES = {
    "staging": DEFAULT_STAGING_DIRECTORY,
    **(_site_settings.get("config_directories") or {}),
}

INSTALL_PROFILE = _site_settings.get("install_profile")

# Name of the installer's own profile; never written as the install profile.
INSTALLER_PROFILE_NAME = os.environ.get("INSTALLER_PROFILE_NAME", "installer")

USERNAME_MAX_LENGTH = 60

STATE_CACHE_TTL = 60  # seconds, 0 disables the cache


# =========================
# LOGGING
# =========================

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "installer": {
            "handlers": ["console"],
            "level": os.environ.get("INSTALLER_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
