"""
PostVersion model for django-post-history.
"""
from django.db import models
from django.db.models import Max
from django.urls import reverse

from ..exceptions import ImmutableVersionError


class PostVersionQuerySet(models.QuerySet):
    """Queries over a post's version history."""

    def for_post(self, post):
        """Versions of one post, newest first. Accepts a Post or its pk."""
        post_id = getattr(post, "pk", post)
        return self.filter(post_id=post_id).order_by("-version")

    def max_version(self, post):
        """Highest version number recorded for the post, 0 if none."""
        post_id = getattr(post, "pk", post)
        result = self.filter(post_id=post_id).aggregate(highest=Max("version"))
        return result["highest"] or 0


class PostVersion(models.Model):
    """
    Immutable snapshot of a post's title and body.

    Version numbers start at 1 and increase per post. The (post, version)
    constraint rejects a second row with the same number, which is what
    makes concurrent allocation safe. Rows are created and deleted, never
    updated.
    """

    post = models.ForeignKey(
        "post_history.Post",
        on_delete=models.CASCADE,
        related_name="versions",
    )
    title = models.CharField(max_length=255, blank=True)
    body = models.TextField(blank=True)
    version = models.PositiveIntegerField()
    created_at = models.DateTimeField()

    objects = PostVersionQuerySet.as_manager()

    class Meta:
        ordering = ["post", "-version"]
        constraints = [
            models.UniqueConstraint(
                fields=["post", "version"],
                name="unique_post_version",
            ),
        ]
        verbose_name = "Post Version"
        verbose_name_plural = "Post Versions"

    def __str__(self):
        return f"{self.post} (v{self.version})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableVersionError(
                f"Version {self.version} of post {self.post_id} is immutable"
            )
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse(
            "post_history:version_detail",
            kwargs={"pk": self.post_id, "version_id": self.pk},
        )

    @property
    def line_count(self):
        """Number of body lines, counted the way diffs count them."""
        return len(self.body.split("\n"))

    def to_dict(self):
        return {
            "id": self.pk,
            "post_id": self.post_id,
            "title": self.title,
            "body": self.body,
            "version": self.version,
            "created_at": self.created_at.isoformat(),
        }
