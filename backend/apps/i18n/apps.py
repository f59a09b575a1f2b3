from django.apps import AppConfig


class I18nConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.i18n"
    verbose_name = "Internationalization"

    def ready(self):
        """Import signal handlers when the app is ready."""
        from . import signals  # noqa: F401
