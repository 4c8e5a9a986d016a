"""
Theme Switcher Views

- toggle_switch: flips the current user's switch opt-in from the admin bar
- ThemeSwitcherSettingsView: site-wide switching settings
"""

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from django.contrib import messages
from django.contrib.auth.mixins import PermissionRequiredMixin
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import FormView

from .forms import ThemeSwitcherSettingsForm
from .options import get_option_store
from .switcher import SWITCH_ACTION, SWITCH_PERMISSION, ThemeSwitcher

logger = logging.getLogger(__name__)

TOGGLE_QUERY_ARGS = ('action', 'token')


def remove_query_args(url, names):
    """Drop the given query arguments from a URL."""
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in names]
    return urlunsplit(parts._replace(query=urlencode(query)))


def get_sendback_url(request):
    """Referring page without the toggle arguments, or '/' when unsafe."""
    referer = request.META.get('HTTP_REFERER', '')
    if referer and url_has_allowed_host_and_scheme(
        referer,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return remove_query_args(referer, TOGGLE_QUERY_ARGS)
    return '/'


def get_switcher(request):
    switcher = getattr(request, 'theme_switcher', None)
    if switcher is None:
        switcher = ThemeSwitcher(get_option_store(), request.user)
    return switcher


@require_GET
def toggle_switch(request):
    """
    Toggle the current user's theme switch and send them back.

    A missing or invalid token leaves storage untouched but still redirects.
    """
    switcher = get_switcher(request)
    sendback = get_sendback_url(request)

    if not switcher.verify_token(request.GET.get('token')):
        logger.info("Rejected theme switch toggle for user %s", switcher.get_current_user_id())
        return redirect(sendback)

    if request.GET.get('action') == SWITCH_ACTION:
        switcher.toggle_user_switch()

    return redirect(sendback)


class ThemeSwitcherSettingsView(PermissionRequiredMixin, FormView):
    """Edit the site-wide theme switcher settings."""
    form_class = ThemeSwitcherSettingsForm
    template_name = 'theme_switcher/settings.html'
    permission_required = SWITCH_PERMISSION

    def dispatch(self, request, *args, **kwargs):
        self.store = get_switcher(request).store
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        return ThemeSwitcherSettingsForm.initial_from_store(self.store)

    def form_valid(self, form):
        form.save(self.store)
        messages.success(self.request, _('Theme Switcher settings saved.'))
        return super().form_valid(form)

    def get_success_url(self):
        return reverse('theme_switcher:settings')
