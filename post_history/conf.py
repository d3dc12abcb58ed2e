"""
Configuration settings for django-post-history.

Override these in your Django settings.py:

    POST_HISTORY = {
        'KEEP_VERSIONS': 20,
        'MAX_ALLOCATION_ATTEMPTS': 5,
        'AUTO_CLEAN_VERSIONS': True,
        ...
    }

The content store and clock are dotted paths so a project can plug in its
own live-content model or a fixed clock for tests:

    POST_HISTORY = {
        'CONTENT_STORE': 'myproject.history.ArticleContentStore',
        'CLOCK': 'myproject.testing.frozen_now',
    }
"""
from django.conf import settings
from django.utils.module_loading import import_string

DEFAULTS = {
    # Retention
    "KEEP_VERSIONS": 10,
    "AUTO_CLEAN_VERSIONS": False,

    # Version number allocation
    "MAX_ALLOCATION_ATTEMPTS": 3,

    # Collaborators
    "CONTENT_STORE": "post_history.content.PostContentStore",
    "CLOCK": "django.utils.timezone.now",

    # Posts
    "SLUG_MAX_LENGTH": 100,
}


class PostHistorySettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from post_history.conf import history_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid post_history setting: {name}")

        user_settings = getattr(settings, "POST_HISTORY", {})
        return user_settings.get(name, DEFAULTS[name])


history_settings = PostHistorySettings()


def get_content_store():
    """Instantiate the configured CONTENT_STORE class."""
    return import_string(history_settings.CONTENT_STORE)()


def get_clock():
    """Return the configured CLOCK callable."""
    return import_string(history_settings.CLOCK)
