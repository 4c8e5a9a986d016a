"""
Management command to inspect and update theme switcher settings.

Usage:
    python manage.py theme_switcher
    python manage.py theme_switcher --enable --theme dark
    python manage.py theme_switcher --disable
"""

from django.core.management.base import BaseCommand, CommandError

from theme_switcher.options import (
    SWITCH_THEME_OPTION, SWITCHING_OPTION, get_option_store,
)
from theme_switcher.themes import get_theme, get_themes


class Command(BaseCommand):
    help = 'Show or update the site-wide theme switcher settings'

    def add_arguments(self, parser):
        toggle = parser.add_mutually_exclusive_group()
        toggle.add_argument(
            '--enable',
            action='store_true',
            help='Allow capable users to switch the theme',
        )
        toggle.add_argument(
            '--disable',
            action='store_true',
            help='Turn theme switching off for the whole site',
        )
        parser.add_argument(
            '--theme',
            help='Stylesheet slug of the installed theme to switch to',
        )

    def handle(self, *args, **options):
        store = get_option_store()

        theme = options['theme']
        if theme is not None:
            if theme and not get_theme(theme).exists():
                raise CommandError(f"Theme not installed: {theme}")
            store.set(SWITCH_THEME_OPTION, theme)
            self.stdout.write(self.style.SUCCESS(f"Switch theme set to '{theme}'"))

        if options['enable']:
            store.set(SWITCHING_OPTION, True)
            self.stdout.write(self.style.SUCCESS("Theme switching enabled"))
        elif options['disable']:
            store.set(SWITCHING_OPTION, False)
            self.stdout.write(self.style.SUCCESS("Theme switching disabled"))

        self.write_status(store)

    def write_status(self, store):
        enabled = bool(store.get(SWITCHING_OPTION, False))
        switch_theme = store.get(SWITCH_THEME_OPTION) or ''

        self.stdout.write(f"Enabled: {'yes' if enabled else 'no'}")
        self.stdout.write(f"Switch theme: {switch_theme or '(none)'}")

        if switch_theme and not get_theme(switch_theme).exists():
            self.stdout.write(self.style.WARNING(
                f"Switch theme '{switch_theme}' is not installed"
            ))

        themes = get_themes()
        if not themes:
            self.stdout.write(self.style.WARNING("No themes installed."))
            return

        self.stdout.write("Installed themes:")
        for theme in themes:
            marker = '*' if theme.stylesheet == switch_theme else ' '
            self.stdout.write(f"  {marker} {theme.stylesheet}: {theme.title}")
