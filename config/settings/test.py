"""Test settings: a throwaway file-backed SQLite database unless DB_ENGINE points elsewhere."""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': os.environ.get('DB_ENGINE', 'django.db.backends.sqlite3'),  # noqa: F405
        'NAME': os.environ.get('DB_NAME', ':memory:'),  # noqa: F405
        'USER': os.environ.get('DB_USER', ''),  # noqa: F405
        'PASSWORD': os.environ.get('DB_PASSWORD', ''),  # noqa: F405
        'HOST': os.environ.get('DB_HOST', ''),  # noqa: F405
        'PORT': os.environ.get('DB_PORT', ''),  # noqa: F405
    }
}

if DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3':
    DATABASES['default']['OPTIONS'] = {'transaction_mode': 'IMMEDIATE', 'timeout': 20}
    # File-backed so threaded tests open their own connections to one database.
    DATABASES['default']['TEST'] = {
        'NAME': os.environ.get('DB_TEST_NAME', str(BASE_DIR / 'test_parking.sqlite3')),  # noqa: F405
    }

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.InMemoryStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

TIME_ZONE = 'UTC'

LOGGING['root']['level'] = 'ERROR'  # noqa: F405
for _logger in LOGGING['loggers'].values():  # noqa: F405
    _logger['level'] = 'WARNING'
