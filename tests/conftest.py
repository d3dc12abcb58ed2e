"""
Shared fixtures for django-post-history tests.
"""
from datetime import datetime, timezone

import pytest
from django.contrib.auth import get_user_model

from post_history import services

User = get_user_model()


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def post(db, user):
    """Create a test post with its first version."""
    return services.create_post(
        author=user,
        title="Test Post",
        body="This is a test post body.",
    )


@pytest.fixture
def make_versions(post):
    """Record extra versions of ``post`` from a list of bodies."""

    def _make(*bodies, title="Test Post"):
        return [services.create_version(post, title, body) for body in bodies]

    return _make


FROZEN_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def frozen_now():
    """Clock used by tests that pin created_at."""
    return FROZEN_NOW
