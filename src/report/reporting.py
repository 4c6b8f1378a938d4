import json
import logging
from collections import Counter
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path

from ..app.constants import TAG_CATEGORIES
from ..core.utils import format_size


@dataclass
class RunSummary:
    pages: int = 0
    posts_seen: int = 0
    missing_url: int = 0
    already_present: int = 0
    eligible: int = 0
    downloaded: int = 0
    failed: int = 0
    metadata_written: int = 0
    bytes: int = 0

    def add_download(self, path: Path) -> None:
        self.downloaded += 1
        try:
            self.bytes += path.stat().st_size
        except OSError:
            pass

    def log_summary(self, logger: logging.Logger) -> None:
        logger.info(
            "SUMMARY: pages=%s posts=%s no_url=%s present=%s downloaded=%s failed=%s metadata=%s size=%s",
            self.pages,
            self.posts_seen,
            self.missing_url,
            self.already_present,
            self.downloaded,
            self.failed,
            self.metadata_written,
            format_size(self.bytes),
        )

    def write_summary(self, path: Path) -> None:
        payload = {
            "timestamp": datetime.now().isoformat(),
            "total": asdict(self),
        }
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def analyze_archive(metadata_dir: Path, logger: logging.Logger, top: int = 10) -> dict[str, list[tuple[str, int]]]:
    """
    Count tag usage per category over every metadata record in the archive.

    Logs the most common tags of each non-empty category and returns them.
    Unreadable records are skipped with a warning.
    """
    counters = {category: Counter() for category in TAG_CATEGORIES}
    records = 0
    for json_path in sorted(metadata_dir.glob("*.json")):
        try:
            data = json.loads(json_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("ANALYZE: failed to read %s: %s", json_path, exc)
            continue
        records += 1
        tags = data.get("tags") or {}
        for category in TAG_CATEGORIES:
            counters[category].update(tags.get(category) or [])

    logger.info("ANALYZE: %s metadata record(s) in %s", records, metadata_dir)
    result: dict[str, list[tuple[str, int]]] = {}
    for category in TAG_CATEGORIES:
        most_common = counters[category].most_common(top)
        if not most_common:
            continue
        result[category] = most_common
        sample = ", ".join(f"{tag} ({count})" for tag, count in most_common)
        logger.info("ANALYZE: %s: %s", category, sample)
    return result
