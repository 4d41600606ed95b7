"""Production settings for VaultFund project.

This module extends the base settings with production specific
configuration. Sensitive values must be provided via environment
variables; missing ones fail at startup.
"""

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

SECRET_KEY = get_env('DJANGO_SECRET_KEY', required=True)

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = get_env('DJANGO_ALLOWED_HOSTS', '').split(',')

# Configure secure proxies and cookies
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True

# SMTP delivery for notifications
EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
EMAIL_HOST_USER = get_env('EMAIL_HOST_USER', required=True)
EMAIL_HOST_PASSWORD = get_env('EMAIL_HOST_PASSWORD', required=True)

# M-Pesa credentials
MPESA_API_BASE_URL = get_env('MPESA_API_BASE_URL', 'https://api.safaricom.co.ke')
MPESA_CONSUMER_KEY = get_env('MPESA_CONSUMER_KEY', required=True)
MPESA_CONSUMER_SECRET = get_env('MPESA_CONSUMER_SECRET', required=True)
MPESA_SHORTCODE = get_env('MPESA_SHORTCODE', required=True)
MPESA_PASSKEY = get_env('MPESA_PASSKEY', required=True)
MPESA_CALLBACK_URL = get_env('MPESA_CALLBACK_URL', required=True)
