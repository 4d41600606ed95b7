"""Development settings for VaultFund project.

Debug on, every host and origin allowed, mail printed to the console
instead of going out over SMTP. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']
CORS_ALLOW_ALL_ORIGINS = True

# Confirmation and digest mails end up in the runserver / worker output
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# Run notification tasks inline when no broker is running locally
CELERY_TASK_ALWAYS_EAGER = get_bool_env('CELERY_TASK_ALWAYS_EAGER', False)
