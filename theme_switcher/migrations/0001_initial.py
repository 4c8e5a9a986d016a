# Generated manually for the theme switcher option storage

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SiteOption',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('key', models.CharField(max_length=191, unique=True)),
                ('value', models.JSONField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Site option',
                'ordering': ['key'],
                'permissions': [('switch_theme', 'Can switch the site theme for themselves')],
            },
        ),
        migrations.CreateModel(
            name='UserOption',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('key', models.CharField(max_length=191)),
                ('value', models.JSONField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='theme_switcher_options', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'User option',
                'ordering': ['user_id', 'key'],
            },
        ),
        migrations.AddConstraint(
            model_name='useroption',
            constraint=models.UniqueConstraint(fields=('user', 'key'), name='unique_user_option'),
        ),
    ]
