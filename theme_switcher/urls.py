"""
URL Configuration for the Theme Switcher

Add to your project's urls.py:
    path('theme-switcher/', include('theme_switcher.urls')),
"""

from django.urls import path
from . import views


app_name = 'theme_switcher'

urlpatterns = [
    path('toggle/',
         views.toggle_switch,
         name='toggle'),
    path('settings/',
         views.ThemeSwitcherSettingsView.as_view(),
         name='settings'),
]
