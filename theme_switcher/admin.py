from django.contrib import admin
from .models import SiteOption, UserOption


@admin.register(SiteOption)
class SiteOptionAdmin(admin.ModelAdmin):
    list_display = ['key', 'value', 'updated_at']
    search_fields = ['key']
    readonly_fields = ['updated_at']


@admin.register(UserOption)
class UserOptionAdmin(admin.ModelAdmin):
    list_display = ['user', 'key', 'value', 'updated_at']
    list_filter = ['key']
    search_fields = ['key', 'user__username']
    readonly_fields = ['updated_at']
    raw_id_fields = ['user']
