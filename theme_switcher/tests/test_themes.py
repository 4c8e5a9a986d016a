"""
Tests for installed theme discovery.
"""
import tempfile
from pathlib import Path
from unittest.mock import patch

from django.conf import settings
from django.test import SimpleTestCase, override_settings

from theme_switcher import themes
from theme_switcher.themes import (
    Theme, clear_theme_cache, get_default_theme, get_theme, get_theme_choices,
    get_themes, get_themes_dir, load_theme,
)


class ThemesDirMixin:
    """Creates a temporary themes directory per test."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        clear_theme_cache()
        self.themes_dir = Path(self.tmp.name)
        override = override_settings(THEME_SWITCHER_THEMES_DIR=self.themes_dir)
        override.enable()
        self.addCleanup(override.disable)
        self.addCleanup(self.tmp.cleanup)

    def make_theme(self, slug, manifest):
        theme_dir = self.themes_dir / slug
        theme_dir.mkdir()
        if manifest is not None:
            (theme_dir / 'theme.yaml').write_text(manifest)
        return theme_dir


class LoadThemeTest(ThemesDirMixin, SimpleTestCase):

    def test_manifest(self):
        theme_dir = self.make_theme('dark', 'name: Dark\ndescription: Night mode\n')
        theme = load_theme(theme_dir)
        self.assertEqual(theme, Theme('dark', 'Dark', 'Night mode', installed=True))
        self.assertTrue(theme.exists())

    def test_name_defaults_to_slug(self):
        theme_dir = self.make_theme('plain', '')
        self.assertEqual(load_theme(theme_dir).title, 'plain')

    def test_missing_manifest(self):
        theme_dir = self.make_theme('bare', None)
        self.assertIsNone(load_theme(theme_dir))

    def test_invalid_yaml(self):
        theme_dir = self.make_theme('broken', 'name: [unclosed\n')
        with self.assertLogs('theme_switcher.themes', level='ERROR'):
            self.assertIsNone(load_theme(theme_dir))

    def test_non_mapping_manifest(self):
        theme_dir = self.make_theme('list', '- one\n- two\n')
        with self.assertLogs('theme_switcher.themes', level='WARNING'):
            self.assertIsNone(load_theme(theme_dir))


class GetThemesTest(ThemesDirMixin, SimpleTestCase):

    def test_sorted_by_title(self):
        self.make_theme('writerly', 'name: Writerly\n')
        self.make_theme('dark', 'name: Dark\n')
        self.assertEqual([t.stylesheet for t in get_themes()], ['dark', 'writerly'])

    def test_skips_files_and_unusable_dirs(self):
        self.make_theme('dark', 'name: Dark\n')
        self.make_theme('bare', None)
        (self.themes_dir / 'README.txt').write_text('not a theme')
        self.assertEqual([t.stylesheet for t in get_themes()], ['dark'])

    def test_missing_directory(self):
        with override_settings(THEME_SWITCHER_THEMES_DIR=self.themes_dir / 'nope'):
            with self.assertLogs('theme_switcher.themes', level='WARNING'):
                self.assertEqual(get_themes(), [])

    def test_choices(self):
        self.make_theme('dark', 'name: Dark\n')
        self.assertEqual(get_theme_choices(), [('dark', 'Dark')])


class GetThemeTest(ThemesDirMixin, SimpleTestCase):

    def test_installed(self):
        self.make_theme('dark', 'name: Dark\n')
        self.assertTrue(get_theme('dark').exists())

    def test_missing(self):
        theme = get_theme('gone')
        self.assertEqual(theme.stylesheet, 'gone')
        self.assertFalse(theme.exists())

    def test_empty_slug(self):
        self.assertFalse(get_theme('').exists())
        self.assertFalse(get_theme(None).exists())


class DefaultThemeTest(SimpleTestCase):

    @override_settings(THEME_SWITCHER_DEFAULT_THEME='dark')
    def test_from_settings(self):
        self.assertEqual(get_default_theme(), 'dark')

    def test_shipped_themes(self):
        self.assertEqual(
            [t.stylesheet for t in get_themes()],
            ['dark', 'writerly'],
        )


class ThemesDirSettingTest(SimpleTestCase):

    def test_configured_dir(self):
        with override_settings(THEME_SWITCHER_THEMES_DIR='/srv/themes'):
            self.assertEqual(get_themes_dir(), Path('/srv/themes'))

    def test_configured_dir_without_base_dir(self):
        with override_settings(THEME_SWITCHER_THEMES_DIR='/srv/themes'):
            del settings.BASE_DIR
            self.assertEqual(get_themes_dir(), Path('/srv/themes'))

    def test_defaults_to_base_dir(self):
        with override_settings(BASE_DIR=Path('/srv/site')):
            del settings.THEME_SWITCHER_THEMES_DIR
            self.assertEqual(get_themes_dir(), Path('/srv/site/themes'))


class ThemeCacheTest(ThemesDirMixin, SimpleTestCase):

    def test_directory_scanned_once(self):
        self.make_theme('dark', 'name: Dark\n')
        with patch.object(themes, 'load_theme', wraps=load_theme) as loader:
            get_themes()
            get_theme('dark')
            get_theme('gone')
            get_theme_choices()
        self.assertEqual(loader.call_count, 1)

    def test_cached_list_is_not_shared(self):
        self.make_theme('dark', 'name: Dark\n')
        get_themes().clear()
        self.assertEqual(len(get_themes()), 1)

    def test_clear_picks_up_new_themes(self):
        self.make_theme('dark', 'name: Dark\n')
        self.assertEqual(len(get_themes()), 1)

        self.make_theme('writerly', 'name: Writerly\n')
        self.assertEqual(len(get_themes()), 1)

        clear_theme_cache()
        self.assertEqual(len(get_themes()), 2)

    def test_setting_change_clears_cache(self):
        self.make_theme('dark', 'name: Dark\n')
        self.assertEqual(len(get_themes()), 1)
        self.make_theme('writerly', 'name: Writerly\n')

        with override_settings(THEME_SWITCHER_DEFAULT_THEME='dark'):
            self.assertEqual(len(get_themes()), 2)
