"""
Theme context processor.

Exposes the theme that should render the current request. Requires
ThemeSwitcherMiddleware; without it the default theme is used.
"""

from .themes import get_default_theme


def theme_context(request):
    """
    Add theme context to all templates.

    The active theme is determined by:
    1. The user's switched theme, when switching applies to this request
    2. The site's stylesheet option
    3. Default: THEME_SWITCHER_DEFAULT_THEME
    """
    switcher = getattr(request, 'theme_switcher', None)
    if switcher is None:
        return {
            'active_theme': get_default_theme(),
            'is_theme_switched': False,
            'theme_switcher': None,
        }

    return {
        'active_theme': switcher.get_active_theme(),
        'is_theme_switched': switcher.is_switched(),
        'theme_switcher': switcher,
    }
