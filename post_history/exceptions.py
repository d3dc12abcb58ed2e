"""
Exceptions raised by post_history.

VersionNotFound and ContentNotFound subclass ObjectDoesNotExist, so code that
already handles Django lookups (get_object_or_404 style views, DRF handlers)
treats them as 404s.
"""
from django.core.exceptions import ObjectDoesNotExist


class PostHistoryError(Exception):
    """Base class for post history errors."""


class VersionNotFound(PostHistoryError, ObjectDoesNotExist):
    """The requested version does not exist for the post."""


class ContentNotFound(PostHistoryError, ObjectDoesNotExist):
    """The live post being restored does not exist."""


class VersionConflict(PostHistoryError):
    """
    Version number allocation kept colliding.

    Raised after MAX_ALLOCATION_ATTEMPTS inserts hit the (post, version)
    unique constraint. Safe for the caller to retry.
    """


class TransactionFailure(PostHistoryError):
    """A restore failed part-way and was rolled back in full."""


class ImmutableVersionError(PostHistoryError):
    """Stored versions cannot be modified."""
