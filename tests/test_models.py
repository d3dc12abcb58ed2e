"""
Tests for django-post-history models.
"""
import pytest
from django.db import IntegrityError, transaction
from django.utils import timezone

from post_history.exceptions import ImmutableVersionError
from post_history.models import Post, PostVersion


class TestPost:
    """Tests for Post model."""

    def test_create_post(self, db, user):
        """Test creating a post."""
        post = Post.objects.create(
            title="Hello World",
            body="My first post!",
            author=user,
        )
        assert post.slug == "hello-world"
        assert post.created_at is not None

    def test_unique_slug(self, db, user):
        """Test slug collisions get a numeric suffix."""
        Post.objects.create(title="Same", body="one", author=user)
        second = Post.objects.create(title="Same", body="two", author=user)
        assert second.slug == "same-1"

    def test_post_preview(self, db, user):
        """Test post preview truncation."""
        post = Post.objects.create(title="Test", body="x" * 500, author=user)
        assert len(post.preview) == 283  # 280 + "..."

    def test_latest_version(self, post, make_versions):
        """Test latest version lookup."""
        make_versions("second", "third")
        assert post.latest_version.version == 3

    def test_delete_cascades_to_versions(self, post, make_versions):
        """Test versions are removed with their post."""
        make_versions("second")
        post.delete()
        assert PostVersion.objects.count() == 0


class TestPostVersion:
    """Tests for PostVersion model."""

    def test_str(self, post):
        assert str(post.latest_version) == "Test Post (v1)"

    def test_versions_are_immutable(self, post):
        """Test saving an existing version is refused."""
        version = post.latest_version
        version.title = "Edited"
        with pytest.raises(ImmutableVersionError):
            version.save()

        version.refresh_from_db()
        assert version.title == "Test Post"

    def test_unique_number_per_post(self, post):
        """Test the (post, version) constraint."""
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                PostVersion.objects.create(
                    post=post,
                    title="dup",
                    body="dup",
                    version=1,
                    created_at=timezone.now(),
                )

    def test_same_number_on_different_posts(self, db, user):
        """Test numbering is independent per post."""
        first = Post.objects.create(title="A", body="a", author=user)
        second = Post.objects.create(title="B", body="b", author=user)
        for post in (first, second):
            PostVersion.objects.create(
                post=post, title=post.title, body=post.body,
                version=1, created_at=timezone.now(),
            )
        assert PostVersion.objects.filter(version=1).count() == 2

    def test_for_post_is_newest_first(self, post, make_versions):
        make_versions("second", "third")
        numbers = list(PostVersion.objects.for_post(post).values_list("version", flat=True))
        assert numbers == [3, 2, 1]

    def test_max_version(self, db, user, post, make_versions):
        empty = Post.objects.create(title="Empty", body="", author=user)
        make_versions("second")
        assert PostVersion.objects.max_version(post) == 2
        assert PostVersion.objects.max_version(empty.pk) == 0

    def test_line_count(self, post, make_versions):
        (version,) = make_versions("a\nb\n")
        assert version.line_count == 3
