"""
Theme Switcher Template Tags

Usage in templates:
    {% load theme_switcher_tags %}
    {% theme_switcher_menu %}
"""

from django import template
from django.urls import reverse

register = template.Library()


@register.inclusion_tag('theme_switcher/admin_bar.html', takes_context=True)
def theme_switcher_menu(context):
    """Render the admin bar switch item, or nothing for ineligible users."""
    request = context.get('request')
    switcher = getattr(request, 'theme_switcher', None)
    if switcher is None:
        return {'item': None}

    return {'item': switcher.get_admin_bar_item(reverse('theme_switcher:toggle'))}
