from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class FileData:
    width: int
    height: int
    ext: str
    size: int
    md5: str
    url: Optional[str] = None  # None when the remote file was deleted


@dataclass
class Tags:
    general: list[str] = field(default_factory=list)
    species: list[str] = field(default_factory=list)
    character: list[str] = field(default_factory=list)
    copyright: list[str] = field(default_factory=list)
    artist: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)
    lore: list[str] = field(default_factory=list)
    meta: list[str] = field(default_factory=list)


@dataclass
class Flags:
    pending: bool = False
    flagged: bool = False
    deleted: bool = False


@dataclass
class Post:
    id: int
    file: FileData
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    tags: Tags = field(default_factory=Tags)
    rating: Optional[str] = None
    flags: Flags = field(default_factory=Flags)

    def to_record(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class HydratedPost:
    """A post with its local media and metadata paths attached."""
    post: Post
    file_path: Path
    tags_path: Path

    @property
    def url(self) -> Optional[str]:
        return self.post.file.url

    @property
    def md5(self) -> str:
        return self.post.file.md5

    def to_record(self) -> dict:
        record = self.post.to_record()
        record["file_path"] = str(self.file_path)
        record["tags_path"] = str(self.tags_path)
        return record
