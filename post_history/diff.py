"""
Line-level change summaries between two snapshots.

The line count is a multiset match, not a minimal edit script: every line of
the newer text that still has an unmatched identical line in the older text
counts as unchanged, wherever it sits. As a result

- a line that only moved scores as no change,
- a line with a one-character edit scores as one removal plus one addition,
- with repeated lines, which copy "matched" is not tracked.

Read the numbers as the size of a change, not as a patch.
"""
from collections import Counter
from dataclasses import asdict, dataclass

TITLE_CHANGED = "Title changed"
CONTENT_CHANGED = "Content changed: +{added} lines / -{removed} lines"
NO_CHANGES = "No changes"
SUMMARY_SEPARATOR = "; "


@dataclass(frozen=True)
class LineDiff:
    added: int
    removed: int

    @property
    def changed(self):
        return bool(self.added or self.removed)


@dataclass(frozen=True)
class VersionDiff:
    """Result of comparing two versions of the same post."""

    from_version: int
    to_version: int
    title_changed: bool
    added: int
    removed: int
    summary: str

    def as_dict(self):
        return asdict(self)


def split_lines(text):
    """Split on newlines; a trailing newline yields a trailing empty line."""
    return text.split("\n")


def compute_line_diff(old, new):
    """Count lines added and removed going from ``old`` to ``new``."""
    old_lines = split_lines(old)
    remaining = Counter(old_lines)

    matched = 0
    added = 0
    for line in split_lines(new):
        if remaining[line] > 0:
            remaining[line] -= 1
            matched += 1
        else:
            added += 1

    return LineDiff(added=added, removed=len(old_lines) - matched)


def summarize(title_changed, line_diff):
    """Build the human-readable summary string."""
    parts = []
    if title_changed:
        parts.append(TITLE_CHANGED)
    if line_diff.changed:
        parts.append(
            CONTENT_CHANGED.format(added=line_diff.added, removed=line_diff.removed)
        )
    return SUMMARY_SEPARATOR.join(parts) if parts else NO_CHANGES


def diff_snapshots(old, new):
    """
    Compare two snapshots.

    Both arguments need ``version``, ``title`` and ``body`` attributes,
    which PostVersion provides.
    """
    title_changed = old.title != new.title
    line_diff = compute_line_diff(old.body, new.body)
    return VersionDiff(
        from_version=old.version,
        to_version=new.version,
        title_changed=title_changed,
        added=line_diff.added,
        removed=line_diff.removed,
        summary=summarize(title_changed, line_diff),
    )
