"""WSGI config for SpotBnB project.

Entry point for runserver and production WSGI servers (gunicorn). The
process-wide database connections are owned by Django from here on.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
