"""Test settings for VaultFund project.

In-memory SQLite, in-memory mail outbox and eager Celery so that
confirmation tasks run inside the test process.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
NOTIFIER_BACKEND = 'apps.notifications.backends.EmailNotifier'

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'
CELERY_BEAT_SCHEDULER = 'celery.beat:PersistentScheduler'

PAYMENT_GATEWAY_CLIENT = 'apps.payments.gateway.MpesaClient'
MPESA_API_BASE_URL = 'https://mpesa.test'
MPESA_CONSUMER_KEY = 'test-key'
MPESA_CONSUMER_SECRET = 'test-secret'
MPESA_SHORTCODE = '174379'
MPESA_PASSKEY = 'test-passkey'
MPESA_CALLBACK_URL = 'https://vaultfund.test/api/v1/payments/mpesa/callback/'

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}
