import json
import logging

from ..core.models import HydratedPost


def export_json(hydrated: HydratedPost, logger: logging.Logger) -> bool:
    # The record carries the local paths too, so a metadata file tells where
    # its media was saved.
    data = hydrated.to_record()
    try:
        with hydrated.tags_path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=2)
    except OSError as exc:
        logger.error("Could not write metadata %s: %s", hydrated.tags_path, exc)
        return False
    logger.debug("Wrote metadata %s", hydrated.tags_path.name)
    return True
