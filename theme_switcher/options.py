"""
Option Stores

Durable option storage used by the theme switcher. The store is the only
state that outlives a single request.

- InMemoryOptionStore: dict-backed, for tests and scripts
- DatabaseOptionStore: SiteOption / UserOption models (default)

The store in use is named by the THEME_SWITCHER_OPTION_STORE setting.
"""

from django.conf import settings
from django.utils.module_loading import import_string

from .models import SiteOption, UserOption

# Site-wide switching enabled
SWITCHING_OPTION = 'theme-switcher'
# Theme stylesheet to switch to
SWITCH_THEME_OPTION = 'theme-switcher_switch-theme'
# The site's durable active theme
STYLESHEET_OPTION = 'stylesheet'
# Per-user switch opt-in
USER_SWITCH_OPTION = 'theme-switcher'

DEFAULT_OPTION_STORE = 'theme_switcher.options.DatabaseOptionStore'


class OptionStore:
    """Interface for site and per-user option storage."""

    def get(self, key, default=None):
        raise NotImplementedError

    def set(self, key, value):
        raise NotImplementedError

    def get_user(self, user_id, key, default=None):
        raise NotImplementedError

    def set_user(self, user_id, key, value):
        raise NotImplementedError


class InMemoryOptionStore(OptionStore):

    def __init__(self, options=None, user_options=None):
        self.options = dict(options or {})
        self.user_options = dict(user_options or {})

    def get(self, key, default=None):
        return self.options.get(key, default)

    def set(self, key, value):
        self.options[key] = value

    def get_user(self, user_id, key, default=None):
        return self.user_options.get((user_id, key), default)

    def set_user(self, user_id, key, value):
        self.user_options[(user_id, key)] = value


class DatabaseOptionStore(OptionStore):

    def get(self, key, default=None):
        option = SiteOption.objects.filter(key=key).first()
        return default if option is None else option.value

    def set(self, key, value):
        SiteOption.objects.update_or_create(key=key, defaults={'value': value})

    def get_user(self, user_id, key, default=None):
        option = UserOption.objects.filter(user_id=user_id, key=key).first()
        return default if option is None else option.value

    def set_user(self, user_id, key, value):
        UserOption.objects.update_or_create(
            user_id=user_id, key=key, defaults={'value': value}
        )


def get_option_store():
    """Instantiate the option store configured in settings."""
    path = getattr(settings, 'THEME_SWITCHER_OPTION_STORE', DEFAULT_OPTION_STORE)
    return import_string(path)()
