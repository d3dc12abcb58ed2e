"""
Models for django-post-history.

All models are importable from post_history.models:

    from post_history.models import Post, PostVersion
"""
from .posts import Post
from .versions import PostVersion

__all__ = [
    "Post",
    "PostVersion",
]
