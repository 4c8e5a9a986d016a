"""
Tests for the theme_switcher management command.
"""
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from theme_switcher.options import (
    DatabaseOptionStore, SWITCH_THEME_OPTION, SWITCHING_OPTION,
)


class ThemeSwitcherCommandTest(TestCase):

    def setUp(self):
        self.store = DatabaseOptionStore()

    def run_command(self, *args):
        out = StringIO()
        call_command('theme_switcher', *args, stdout=out)
        return out.getvalue()

    def test_status(self):
        output = self.run_command()
        self.assertIn('Enabled: no', output)
        self.assertIn('Switch theme: (none)', output)
        self.assertIn('dark: Dark', output)
        self.assertIn('writerly: Writerly', output)

    def test_enable_with_theme(self):
        output = self.run_command('--enable', '--theme', 'dark')
        self.assertTrue(self.store.get(SWITCHING_OPTION))
        self.assertEqual(self.store.get(SWITCH_THEME_OPTION), 'dark')
        self.assertIn('Enabled: yes', output)
        self.assertIn('* dark: Dark', output)

    def test_disable(self):
        self.store.set(SWITCHING_OPTION, True)
        output = self.run_command('--disable')
        self.assertIs(self.store.get(SWITCHING_OPTION), False)
        self.assertIn('Theme switching disabled', output)

    def test_clear_theme(self):
        self.store.set(SWITCH_THEME_OPTION, 'dark')
        self.run_command('--theme', '')
        self.assertEqual(self.store.get(SWITCH_THEME_OPTION), '')

    def test_unknown_theme(self):
        with self.assertRaises(CommandError):
            self.run_command('--theme', 'gone')
        self.assertIsNone(self.store.get(SWITCH_THEME_OPTION))

    def test_enable_and_disable_conflict(self):
        with self.assertRaises(CommandError):
            self.run_command('--enable', '--disable')

    def test_warns_about_missing_switch_theme(self):
        self.store.set(SWITCH_THEME_OPTION, 'gone')
        output = self.run_command()
        self.assertIn("Switch theme 'gone' is not installed", output)
