"""
Live content store used when restoring a version.

A store exposes ``update_content(post_id, title, body)`` and returns the
updated object. It runs inside the restore's transaction, so it must use the
default database connection and must not commit on its own.
"""
from .exceptions import ContentNotFound
from .models import Post


class PostContentStore:
    """Writes restored title/body onto post_history.models.Post."""

    model = Post

    def update_content(self, post_id, title, body):
        try:
            post = self.model.objects.select_for_update().get(pk=post_id)
        except self.model.DoesNotExist:
            raise ContentNotFound(f"Post {post_id} not found") from None

        post.title = title
        post.body = body
        post.save(update_fields=["title", "body", "updated_at"])
        return post
