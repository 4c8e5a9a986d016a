"""
Theme Switcher

Request-scoped glue between the option store, the current user and the
conditional override registry. One ThemeSwitcher is built per request by
ThemeSwitcherMiddleware and attached to the request as
`request.theme_switcher`.
"""

import logging
from urllib.parse import urlencode

from django.conf import settings
from django.core import signing
from django.utils.translation import gettext as _

from .conditional import OverrideRegistry, OverrideSession, always
from .options import (
    STYLESHEET_OPTION, SWITCH_THEME_OPTION, SWITCHING_OPTION, USER_SWITCH_OPTION,
)
from .themes import get_default_theme, get_theme

logger = logging.getLogger(__name__)

SWITCH_PERMISSION = 'theme_switcher.switch_theme'
TOKEN_SALT = 'theme-switcher-user'
SWITCH_ACTION = 'switch-theme'


class ThemeSwitcher:

    def __init__(self, store, user=None):
        self.store = store
        self.user = user
        self.registry = OverrideRegistry()
        self.session = OverrideSession(self.registry)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def get_current_user_id(self):
        user = self.user
        if user is not None and user.is_authenticated:
            return user.pk
        return 0

    def get_switch_theme(self):
        """Return the stylesheet of the theme to switch to."""
        return self.store.get(SWITCH_THEME_OPTION) or ''

    def is_switching_enabled(self):
        return bool(self.store.get(SWITCHING_OPTION, False))

    def is_switching_user_enabled(self, user_id=0):
        if not user_id:
            user_id = self.get_current_user_id()

        if not user_id:
            return False

        return bool(self.store.get_user(user_id, USER_SWITCH_OPTION, False))

    def can_switch(self, user=None):
        user = user if user is not None else self.user
        if user is None or not user.is_authenticated or not user.is_active:
            return False
        return user.has_perm(SWITCH_PERMISSION)

    # =========================================================================
    # SWITCHING
    # =========================================================================

    def maybe_switch(self):
        """
        Register the switch theme when switching is enabled for both the
        site and the current user.

        Eligibility is checked here, before registration. The registered
        condition is left for request-dependent switching.
        """
        if not (self.is_switching_enabled() and self.is_switching_user_enabled()):
            return False

        # Only switch for the current user, never for the whole site
        self.registry.set_option('persistent', False)
        self.registry.register(self.get_switch_theme(), always)
        return True

    def get_switched_theme(self):
        return self.session.get_switched()

    def is_switched(self):
        return self.session.is_switched()

    def apply_persistent_switch(self):
        """
        Write a persistent switch to the site's stylesheet option.

        Separate from resolution so that resolving never mutates storage.
        """
        if not self.session.is_persistent() or not self.session.is_switched():
            return False

        switched = self.session.get_switched()
        if self.store.get(STYLESHEET_OPTION) == switched:
            return False

        self.store.set(STYLESHEET_OPTION, switched)
        logger.info("Persisted theme switch to %s", switched)
        return True

    def get_active_theme(self):
        """Return the stylesheet slug that should render this request."""
        candidates = (self.get_switched_theme(), self.store.get(STYLESHEET_OPTION))
        for stylesheet in candidates:
            if not stylesheet:
                continue
            if get_theme(stylesheet).exists():
                return stylesheet
            logger.warning("Theme %s is not installed, skipping it", stylesheet)

        return get_default_theme()

    # =========================================================================
    # TOGGLE ACTION
    # =========================================================================

    def _signer(self):
        return signing.TimestampSigner(salt=TOKEN_SALT)

    def make_token(self):
        return self._signer().sign(str(self.get_current_user_id()))

    def verify_token(self, token):
        """Whether the token was issued to the current user and is still valid."""
        if not token:
            return False

        max_age = getattr(settings, 'THEME_SWITCHER_TOKEN_MAX_AGE', 60 * 60 * 24)
        try:
            user_id = self._signer().unsign(token, max_age=max_age)
        except signing.BadSignature:
            return False

        return user_id == str(self.get_current_user_id())

    def toggle_user_switch(self):
        """
        Invert the current user's switch opt-in.

        Returns the new value, or None when there is no user to toggle for.
        """
        user_id = self.get_current_user_id()
        if not user_id:
            return None

        enabled = not self.is_switching_user_enabled(user_id)
        self.store.set_user(user_id, USER_SWITCH_OPTION, enabled)
        logger.info("User %s turned theme switching %s", user_id, 'on' if enabled else 'off')
        return enabled

    # =========================================================================
    # ADMIN BAR
    # =========================================================================

    def get_admin_bar_item(self, toggle_url):
        """
        Return the admin bar menu item for the switcher, or None when the
        user is not capable, switching is disabled or the theme is missing.
        """
        if not self.can_switch() or not self.is_switching_enabled():
            return None

        theme = get_theme(self.get_switch_theme())
        if not theme.exists():
            return None

        switched = self.is_switched()
        if switched:
            title = _('Switch back to the original layout')
        else:
            title = _('Switch the layout to the %(theme)s theme') % {'theme': theme.title}

        query = urlencode({'action': SWITCH_ACTION, 'token': self.make_token()})
        return {
            'id': 'theme-switcher',
            'title': title,
            'href': f'{toggle_url}?{query}',
            'css_class': 'hover active' if switched else '',
            'switched': switched,
        }
