"""ASGI entry point for VaultFund.

Exposes ``application`` for ASGI servers (uvicorn, daphne). The API is plain
HTTP; no channel layers are configured.
"""

import os

from django.core.asgi import get_asgi_application  # type: ignore

# Production servers set DJANGO_SETTINGS_MODULE=config.settings.prod
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
