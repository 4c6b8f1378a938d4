from pathlib import Path
from typing import Iterable

from .models import HydratedPost, Post


def media_filename(md5: str, ext: str) -> str:
    return f"{md5}.{ext}"


def metadata_filename(md5: str) -> str:
    return f"{md5}.json"


def hydrate_post(post: Post, media_root: Path, metadata_root: Path) -> HydratedPost:
    # Paths depend only on the checksum and extension so identical content
    # always lands on the same file.
    file_path = media_root / media_filename(post.file.md5, post.file.ext)
    tags_path = metadata_root / metadata_filename(post.file.md5)
    return HydratedPost(post=post, file_path=file_path, tags_path=tags_path)


def hydrate_page(posts: Iterable[Post], media_root: Path, metadata_root: Path) -> list[HydratedPost]:
    return [hydrate_post(post, media_root, metadata_root) for post in posts]
