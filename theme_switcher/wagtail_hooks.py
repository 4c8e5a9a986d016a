from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from wagtail import hooks
from wagtail.admin.menu import MenuItem

from .switcher import SWITCH_PERMISSION


class ThemeSwitcherMenuItem(MenuItem):

    def is_shown(self, request):
        return request.user.has_perm(SWITCH_PERMISSION)


@hooks.register('register_settings_menu_item')
def register_theme_switcher_menu_item():
    return ThemeSwitcherMenuItem(
        _('Theme Switcher'),
        reverse('theme_switcher:settings'),
        icon_name='view',
        order=500,
    )
