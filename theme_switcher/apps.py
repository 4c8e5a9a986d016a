from django.apps import AppConfig


class ThemeSwitcherConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'theme_switcher'
    verbose_name = 'Theme Switcher'
