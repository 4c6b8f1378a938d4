"""
Decide which hydrated posts still need downloading.

There is no separate index of what has been archived: a post counts as done
once a file exists at its media path. Re-running after an interruption picks
up at the first missing file.
"""

from typing import Iterable

from ..core.models import HydratedPost


def is_eligible(hydrated: HydratedPost) -> bool:
    """A post is downloadable when it has a media URL and nothing is on disk yet."""
    if not hydrated.url:
        return False
    return not hydrated.file_path.exists()


def filter_downloadable(posts: Iterable[HydratedPost]) -> list[HydratedPost]:
    # Page order is kept.
    return [post for post in posts if is_eligible(post)]
