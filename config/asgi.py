"""ASGI config for SpotBnB project.

Exposes the ASGI callable for async-capable servers (uvicorn, daphne).
The API itself is synchronous per request.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

# Production servers should set DJANGO_SETTINGS_MODULE explicitly.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
