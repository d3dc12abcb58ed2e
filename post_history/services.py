"""
Version history operations for posts.

Every function accepts either a Post instance or a post primary key.

Version numbers are allocated by reading the current maximum and inserting
``max + 1`` inside a savepoint. The (post, version) unique constraint rejects
a number that a concurrent writer took first; the insert is then retried with
a fresh maximum, up to MAX_ALLOCATION_ATTEMPTS times.
"""
import logging

from django.db import DatabaseError, IntegrityError, transaction

from .conf import get_clock, get_content_store, history_settings
from .diff import diff_snapshots
from .exceptions import (
    ContentNotFound,
    TransactionFailure,
    VersionConflict,
    VersionNotFound,
)
from .models import Post, PostVersion

logger = logging.getLogger(__name__)


def _post_id(post):
    return getattr(post, "pk", post)


def next_version_number(post):
    """Return the number the next version of ``post`` should get."""
    return PostVersion.objects.max_version(post) + 1


def _insert_version(post_id, title, body):
    attempts = history_settings.MAX_ALLOCATION_ATTEMPTS
    clock = get_clock()

    for attempt in range(1, attempts + 1):
        number = next_version_number(post_id)
        try:
            with transaction.atomic():
                version = PostVersion.objects.create(
                    post_id=post_id,
                    title=title,
                    body=body,
                    version=number,
                    created_at=clock(),
                )
        except IntegrityError:
            # Only a taken number is retried; anything else is a real error.
            if not PostVersion.objects.filter(post_id=post_id, version=number).exists():
                raise
            logger.warning(
                "Version %s of post %s already taken (attempt %s of %s)",
                number, post_id, attempt, attempts,
            )
            continue

        logger.debug("Recorded version %s of post %s", number, post_id)
        return version

    raise VersionConflict(
        f"Could not allocate a version number for post {post_id} "
        f"after {attempts} attempts"
    )


def create_version(post, title, body):
    """
    Record a new snapshot of ``post``.

    Raises ContentNotFound if the post does not exist and VersionConflict if
    allocation keeps colliding.
    """
    post_id = _post_id(post)
    with transaction.atomic():
        if not Post.objects.filter(pk=post_id).exists():
            raise ContentNotFound(f"Post {post_id} not found")
        return _insert_version(post_id, title, body)


def list_versions(post):
    """Return all versions of ``post``, newest first."""
    return list(PostVersion.objects.for_post(post))


def get_version(post, version_number):
    """Return the version of ``post`` with the given number."""
    try:
        return PostVersion.objects.get(post_id=_post_id(post), version=version_number)
    except (PostVersion.DoesNotExist, ValueError):
        raise VersionNotFound(
            f"Version {version_number} of post {_post_id(post)} not found"
        ) from None


def get_version_by_id(post, version_id):
    """Return the version with primary key ``version_id``, if it belongs to ``post``."""
    try:
        return PostVersion.objects.get(post_id=_post_id(post), pk=version_id)
    except (PostVersion.DoesNotExist, ValueError):
        raise VersionNotFound(
            f"Version id {version_id} of post {_post_id(post)} not found"
        ) from None


def compare_versions(post, from_version, to_version):
    """
    Summarize the change from one version number to another.

    Returns a VersionDiff. See post_history.diff for how lines are counted.
    """
    old = get_version(post, from_version)
    new = get_version(post, to_version)
    return diff_snapshots(old, new)


def restore_version(post, version_id, content_store=None):
    """
    Copy a past version back onto the live post.

    The restore is itself recorded as a new version equal to the target,
    even when the target is already the latest. The version insert and the
    post update commit together or not at all.

    Returns whatever the content store returns (the updated Post by default).
    """
    store = content_store or get_content_store()
    post_id = _post_id(post)

    try:
        with transaction.atomic():
            target = get_version_by_id(post_id, version_id)
            restored = _insert_version(post_id, target.title, target.body)
            updated = store.update_content(post_id, title=target.title, body=target.body)
    except DatabaseError as exc:
        logger.error(
            "Restore of post %s to version id %s rolled back: %s",
            post_id, version_id, exc,
        )
        raise TransactionFailure(
            f"Restore of post {post_id} to version id {version_id} failed"
        ) from exc

    logger.info(
        "Restored post %s to version %s as version %s",
        post_id, target.version, restored.version,
    )
    return updated


def clean_old_versions(post, keep_count=None):
    """
    Delete the oldest versions of ``post`` beyond the newest ``keep_count``.

    ``keep_count`` defaults to the KEEP_VERSIONS setting. Returns the number
    of versions deleted.
    """
    if keep_count is None:
        keep_count = history_settings.KEEP_VERSIONS
    if keep_count < 0:
        raise ValueError("keep_count must not be negative")

    with transaction.atomic():
        stale_ids = list(
            PostVersion.objects.for_post(post).values_list("pk", flat=True)[keep_count:]
        )
        if not stale_ids:
            return 0
        deleted, _ = PostVersion.objects.filter(pk__in=stale_ids).delete()

    logger.debug("Deleted %s old versions of post %s", deleted, _post_id(post))
    return deleted


def create_post(author, title, body, **fields):
    """Create a post together with its version 1."""
    with transaction.atomic():
        post = Post.objects.create(author=author, title=title, body=body, **fields)
        _insert_version(post.pk, post.title, post.body)
    return post


def update_post(post, title=None, body=None, **fields):
    """
    Update a post, recording a version when its title or body is given.

    Returns a freshly loaded Post; an instance passed in is not modified.
    """
    post_id = _post_id(post)
    record = title is not None or body is not None

    with transaction.atomic():
        try:
            post = Post.objects.select_for_update().get(pk=post_id)
        except Post.DoesNotExist:
            raise ContentNotFound(f"Post {post_id} not found") from None

        for name, value in fields.items():
            setattr(post, name, value)
        if title is not None:
            post.title = title
        if body is not None:
            post.body = body
        post.save()

        if record:
            _insert_version(post.pk, post.title, post.body)
            if history_settings.AUTO_CLEAN_VERSIONS:
                clean_old_versions(post.pk)

    return post
