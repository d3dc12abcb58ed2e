"""
Post model for django-post-history.

Post holds the live title and body. Its history lives in PostVersion.
"""
from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.text import slugify

from ..conf import history_settings


class Post(models.Model):
    """
    Blog post / article.

    Edits that go through post_history.services record a PostVersion
    snapshot; saving the model directly does not.
    """

    title = models.CharField(max_length=255, blank=True)
    slug = models.SlugField(max_length=255, blank=True, db_index=True)
    body = models.TextField()
    excerpt = models.TextField(
        blank=True,
        help_text="Optional manual excerpt. Auto-generated if blank.",
    )

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="history_posts",
    )
    is_draft = models.BooleanField(default=False)

    created_at = models.DateTimeField(db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        if self.title:
            return self.title
        return f"{self.body[:50]}..." if len(self.body) > 50 else self.body

    def save(self, *args, **kwargs):
        # Auto-generate slug from title
        if not self.slug and self.title:
            base_slug = slugify(self.title)[:history_settings.SLUG_MAX_LENGTH]
            slug = base_slug
            counter = 1
            while Post.objects.filter(slug=slug).exclude(pk=self.pk).exists():
                slug = f"{base_slug}-{counter}"
                counter += 1
            self.slug = slug

        if not self.created_at:
            self.created_at = timezone.now()

        super().save(*args, **kwargs)

    def get_versions_url(self):
        return reverse("post_history:version_list", kwargs={"pk": self.pk})

    @property
    def preview(self):
        """Return truncated body for list display."""
        if self.excerpt:
            return self.excerpt
        if len(self.body) > 280:
            return self.body[:280] + "..."
        return self.body

    @property
    def latest_version(self):
        """Return the highest-numbered version, or None."""
        return self.versions.order_by("-version").first()

    def to_dict(self):
        return {
            "id": self.pk,
            "title": self.title,
            "slug": self.slug,
            "body": self.body,
            "excerpt": self.excerpt,
            "is_draft": self.is_draft,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
