"""Settings used by the test suite.

Runs on an in-memory SQLite database with Celery tasks executed eagerly
and outgoing mail captured by Django's locmem backend.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

# No broker in tests
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

MEDIA_HOST = {
    **MEDIA_HOST,  # noqa: F405
    'BUCKET_NAME': 'horoo-test',
    'PUBLIC_BASE': 'https://media.test/horoo-test',
}
