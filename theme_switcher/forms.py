from django import forms
from django.utils.translation import gettext_lazy as _

from .options import SWITCH_THEME_OPTION, SWITCHING_OPTION
from .themes import get_theme_choices


class ThemeSwitcherSettingsForm(forms.Form):
    """Site-wide switching checkbox plus the theme to switch to."""
    enabled = forms.BooleanField(
        required=False,
        label=_('Enable capable users to switch the site\'s layout'),
        help_text=_('By default, theme switching is only allowed for site admins.'),
    )
    switch_theme = forms.ChoiceField(
        required=False,
        label=_('Switch to theme'),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['switch_theme'].choices = (
            [('', _('Select a theme'))] + get_theme_choices()
        )

    @classmethod
    def initial_from_store(cls, store):
        return {
            'enabled': bool(store.get(SWITCHING_OPTION, False)),
            'switch_theme': store.get(SWITCH_THEME_OPTION) or '',
        }

    def save(self, store):
        store.set(SWITCHING_OPTION, bool(self.cleaned_data['enabled']))
        store.set(SWITCH_THEME_OPTION, self.cleaned_data['switch_theme'])
