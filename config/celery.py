"""
Celery application for the VaultFund project.

This module defines the Celery instance used throughout the project. It reads
configuration from Django settings under the `CELERY_` namespace and
autodiscovers tasks from installed apps. The beat schedule (the daily
contribution digest) is defined in `settings/base.py`.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("vaultfund")

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object("django.conf:settings", namespace="CELERY")

# Load task modules from all registered Django app configs.
app.autodiscover_tasks()
