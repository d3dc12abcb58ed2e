"""
django-post-history - Version history for Django blog posts.

Features:
- Append-only, numbered snapshots of post title and body
- Gap-free numbering guarded by a unique constraint with bounded retry
- Line-level change summaries between any two versions
- Atomic restore that records the restore as a new version
- Count-based retention of old versions
"""

__version__ = "0.1.0"
__author__ = "Nestor Wheelock"
