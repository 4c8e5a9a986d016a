"""
WSGI config for the Theme Switcher site.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'switcher_site.settings.production')

application = get_wsgi_application()
