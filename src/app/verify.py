import json
import logging
from pathlib import Path

from .constants import METADATA_DIRNAME
from ..core.paths import media_filename


def verify_archive(root: Path, logger: logging.Logger) -> int:
    if not root.exists():
        logger.error("Verify path does not exist: %s", root)
        return 1

    metadata_dir = root / METADATA_DIRNAME
    json_files = sorted(metadata_dir.glob("*.json"))
    if not json_files:
        logger.warning("No JSON metadata found under %s", metadata_dir)
        return 0

    missing_files = 0
    unreadable = 0
    scanned = 0

    for json_path in json_files:
        try:
            data = json.loads(json_path.read_text(encoding="utf-8"))
            file_data = data["file"]
            name = media_filename(file_data["md5"], file_data["ext"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            unreadable += 1
            logger.warning("VERIFY: failed to read %s: %s", json_path, exc)
            continue

        scanned += 1
        # Stored paths are only meaningful for the run that wrote them, so the
        # media path is recomputed from the record.
        if not (root / name).exists():
            missing_files += 1
            logger.warning("VERIFY: missing file %s | post=%s", name, data.get("id"))

    logger.info(
        "VERIFY SUMMARY: json=%s missing_files=%s unreadable=%s",
        scanned,
        missing_files,
        unreadable,
    )
    return 1 if missing_files or unreadable else 0
