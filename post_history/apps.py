"""Django app configuration for post_history."""
from django.apps import AppConfig


class PostHistoryConfig(AppConfig):
    """Configuration for the post history app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "post_history"
    verbose_name = "Post History"
