"""
Theme Switcher Models

Durable key/value option storage for the theme switcher:
- SiteOption: site-wide options (switching enabled, switch theme, stylesheet)
- UserOption: per-user options (a user's switch opt-in)
"""

from django.conf import settings
from django.db import models


class SiteOption(models.Model):
    """A site-wide option value, keyed by name."""
    key = models.CharField(max_length=191, unique=True)
    value = models.JSONField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['key']
        verbose_name = 'Site option'
        permissions = [
            ('switch_theme', 'Can switch the site theme for themselves'),
        ]

    def __str__(self):
        return self.key


class UserOption(models.Model):
    """An option value scoped to a single user."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='theme_switcher_options',
    )
    key = models.CharField(max_length=191)
    value = models.JSONField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['user_id', 'key']
        verbose_name = 'User option'
        constraints = [
            models.UniqueConstraint(fields=['user', 'key'], name='unique_user_option'),
        ]

    def __str__(self):
        return f"{self.user_id}:{self.key}"
