"""
Theme switcher middleware.

Builds a fresh ThemeSwitcher for every request so that no switching state
is shared between requests. Must come after AuthenticationMiddleware.
"""

from .options import get_option_store
from .switcher import ThemeSwitcher


class ThemeSwitcherMiddleware:

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        switcher = ThemeSwitcher(get_option_store(), getattr(request, 'user', None))
        request.theme_switcher = switcher

        switcher.maybe_switch()
        switcher.apply_persistent_switch()

        return self.get_response(request)
