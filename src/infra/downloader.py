import logging
from pathlib import Path
from typing import Optional

import requests

from .http import MEDIA_TIMEOUT, RateLimiter
from ..core.models import HydratedPost
from ..core.utils import format_size


CHUNK_SIZE = 1024 * 128


def part_path(dest_path: Path) -> Path:
    return dest_path.with_suffix(dest_path.suffix + ".part")


def download_media(
    session: requests.Session,
    hydrated: HydratedPost,
    rate_limiter: RateLimiter,
    logger: logging.Logger,
) -> Optional[Path]:
    """
    Fetch the media of one post into its hydrated file path.

    Returns the written path, or None when the post has no URL or the
    download failed. Failures are logged and never retried here; the file
    stays absent so the next run picks it up again.
    """
    url = hydrated.url
    if not url:
        return None

    dest_path = hydrated.file_path
    # Write to a temporary file first to avoid half-written outputs.
    temp_path = part_path(dest_path)
    rate_limiter.wait()
    logger.info("downloading %s", url)
    try:
        with session.get(url, stream=True, timeout=MEDIA_TIMEOUT) as response:
            response.raise_for_status()
            total = 0
            with temp_path.open("wb") as handle:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if not chunk:
                        continue
                    handle.write(chunk)
                    total += len(chunk)
        temp_path.replace(dest_path)
    except requests.RequestException as exc:
        discard_partial(temp_path, logger)
        logger.error("Could not fetch url %s: %s", url, exc)
        return None
    except OSError as exc:
        discard_partial(temp_path, logger)
        logger.error("Could not write %s: %s", dest_path, exc)
        return None
    finally:
        rate_limiter.mark()

    logger.info("Downloaded %s (%s)", dest_path.name, format_size(total))
    return dest_path


def discard_partial(temp_path: Path, logger: logging.Logger) -> None:
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove partial file %s: %s", temp_path, exc)
