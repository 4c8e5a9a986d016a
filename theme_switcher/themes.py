"""
Installed Themes

Themes live in THEME_SWITCHER_THEMES_DIR, one directory per theme. The
directory name is the theme's stylesheet slug and each directory holds a
theme.yaml manifest:

    name: Dark
    description: High-contrast reading layout
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml
from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

logger = logging.getLogger(__name__)

MANIFEST_NAME = 'theme.yaml'


@dataclass(frozen=True)
class Theme:
    stylesheet: str
    title: str = ''
    description: str = ''
    installed: bool = False

    def exists(self):
        return self.installed


def get_themes_dir():
    themes_dir = getattr(settings, 'THEME_SWITCHER_THEMES_DIR', None)
    if themes_dir is None:
        themes_dir = Path(settings.BASE_DIR) / 'themes'
    return Path(themes_dir)


def get_default_theme():
    return getattr(settings, 'THEME_SWITCHER_DEFAULT_THEME', 'writerly')


def load_theme(theme_dir):
    """Load a theme from its directory, or None when the manifest is unusable."""
    manifest = Path(theme_dir) / MANIFEST_NAME
    try:
        with open(manifest, 'r') as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return None
    except yaml.YAMLError as e:
        logger.error("YAML parse error in %s: %s", manifest, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Theme manifest is not a mapping: %s", manifest)
        return None

    stylesheet = Path(theme_dir).name
    return Theme(
        stylesheet=stylesheet,
        title=str(data.get('name') or stylesheet),
        description=str(data.get('description') or ''),
        installed=True,
    )


@lru_cache(maxsize=None)
def scan_themes(themes_dir):
    """Scan a themes directory once and keep the result."""
    if not themes_dir.is_dir():
        logger.warning("Themes directory not found: %s", themes_dir)
        return ()

    themes = []
    for theme_dir in sorted(themes_dir.iterdir()):
        if not theme_dir.is_dir():
            continue
        theme = load_theme(theme_dir)
        if theme is not None:
            themes.append(theme)

    return tuple(sorted(themes, key=lambda t: t.title.lower()))


def clear_theme_cache():
    scan_themes.cache_clear()


@receiver(setting_changed)
def clear_theme_cache_on_setting_change(setting, **kwargs):
    if setting.startswith('THEME_SWITCHER_') or setting == 'BASE_DIR':
        clear_theme_cache()


def get_themes():
    """Return all installed themes, sorted by title."""
    return list(scan_themes(get_themes_dir()))


def get_theme(stylesheet):
    """
    Return the theme for a stylesheet slug.

    Never raises: a missing or empty slug gives a Theme whose exists()
    is False.
    """
    if stylesheet:
        for theme in get_themes():
            if theme.stylesheet == stylesheet:
                return theme
    return Theme(stylesheet=stylesheet or '')


def get_theme_choices():
    return [(theme.stylesheet, theme.title) for theme in get_themes()]
