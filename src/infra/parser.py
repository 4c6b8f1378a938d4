from typing import Any, Optional

from ..core.models import FileData, Flags, Post, Tags
from ..app.constants import TAG_CATEGORIES


class PageDecodeError(ValueError):
    """The favorites page body does not have the expected shape."""


def _as_int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def parse_file(data: dict) -> FileData:
    ext = data.get("ext")
    md5 = data.get("md5")
    if not ext or not md5:
        raise PageDecodeError("post file is missing ext or md5")
    # Deleted posts come back with "url": null.
    url = data.get("url") or None
    return FileData(
        width=_as_int(data.get("width")),
        height=_as_int(data.get("height")),
        ext=str(ext),
        size=_as_int(data.get("size")),
        md5=str(md5),
        url=url,
    )


def parse_tags(data: Optional[dict]) -> Tags:
    data = data or {}
    values = {}
    for category in TAG_CATEGORIES:
        raw = data.get(category) or []
        values[category] = [str(tag) for tag in raw]
    return Tags(**values)


def parse_flags(data: Optional[dict]) -> Flags:
    data = data or {}
    return Flags(
        pending=bool(data.get("pending", False)),
        flagged=bool(data.get("flagged", False)),
        deleted=bool(data.get("deleted", False)),
    )


def parse_post(data: dict) -> Post:
    if not isinstance(data, dict):
        raise PageDecodeError(f"expected a post object, got {type(data).__name__}")
    if "id" not in data:
        raise PageDecodeError("post is missing id")
    file_data = data.get("file")
    if not isinstance(file_data, dict):
        raise PageDecodeError(f"post {data.get('id')} has no file block")
    try:
        post_id = int(data["id"])
    except (TypeError, ValueError) as exc:
        raise PageDecodeError(f"invalid post id {data['id']!r}") from exc
    return Post(
        id=post_id,
        file=parse_file(file_data),
        created_at=_as_text(data.get("created_at")),
        updated_at=_as_text(data.get("updated_at")),
        tags=parse_tags(data.get("tags")),
        rating=_as_text(data.get("rating")),
        flags=parse_flags(data.get("flags")),
    )


def parse_page(data: Any) -> list[Post]:
    """Decode one favorites response body (``{"posts": [...]}``) into posts."""
    if not isinstance(data, dict):
        raise PageDecodeError(f"expected a JSON object, got {type(data).__name__}")
    posts = data.get("posts")
    if not isinstance(posts, list):
        raise PageDecodeError("response has no 'posts' list")
    return [parse_post(entry) for entry in posts]
