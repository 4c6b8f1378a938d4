"""
Page walker: fetch favorites pages until an empty one, archive each page.

Per page:
- Fetch and decode the page (any failure here aborts the run)
- Hydrate local paths
- Keep the posts that are not on disk yet
- Download each one, then write its metadata record
"""

import logging
from typing import Optional

import requests

from .constants import WalkConfig
from .dedupe import filter_downloadable
from ..core.models import HydratedPost
from ..core.paths import hydrate_page
from ..core.utils import ensure_dir, plural
from ..infra.downloader import download_media
from ..infra.http import RateLimiter, favorites_url, fetch_json
from ..infra.parser import parse_page
from ..report.export import export_json
from ..report.reporting import RunSummary


def archive_post(
    session: requests.Session,
    hydrated: HydratedPost,
    rate_limiter: RateLimiter,
    logger: logging.Logger,
    summary: RunSummary,
) -> None:
    # An earlier post on the same page may already have written this md5.
    if hydrated.file_path.exists():
        logger.debug("Skipping %s, already archived", hydrated.file_path.name)
        summary.already_present += 1
        return

    path = download_media(session, hydrated, rate_limiter, logger)
    if not path:
        summary.failed += 1
        return
    summary.add_download(path)

    if export_json(hydrated, logger):
        summary.metadata_written += 1


def process_page(
    session: requests.Session,
    hydrated_posts: list[HydratedPost],
    config: WalkConfig,
    rate_limiter: RateLimiter,
    logger: logging.Logger,
    summary: RunSummary,
) -> None:
    summary.posts_seen += len(hydrated_posts)
    for hydrated in hydrated_posts:
        logger.debug("Hydrated output path %s, tags path %s", hydrated.file_path, hydrated.tags_path)
        if not hydrated.url:
            summary.missing_url += 1
        elif hydrated.file_path.exists():
            summary.already_present += 1

    downloadable = filter_downloadable(hydrated_posts)
    summary.eligible += len(downloadable)
    if not downloadable:
        logger.info("No images to download")
        return
    logger.info("%s to download", plural(len(downloadable), "image"))

    for hydrated in downloadable:
        if config.dry_run:
            logger.info("DRY-RUN: would download %s -> %s", hydrated.url, hydrated.file_path)
            continue
        archive_post(session, hydrated, rate_limiter, logger, summary)


def walk_favorites(
    session: requests.Session,
    config: WalkConfig,
    logger: logging.Logger,
    summary: Optional[RunSummary] = None,
) -> RunSummary:
    """
    Walk every favorites page of ``config.user_id`` and archive its posts.

    Stops on the first empty page. Errors on the page request itself
    (network, HTTP status, malformed body) are not caught: they end the run,
    leaving whatever was already written on disk.
    """
    summary = summary or RunSummary()
    output_dir = config.output_dir
    metadata_dir = config.metadata_dir
    ensure_dir(output_dir)
    ensure_dir(metadata_dir)

    # One limiter for pages and media: every request, page or file, waits
    # out the pause after the previous one finished.
    rate_limiter = RateLimiter(config.sleep_seconds)

    page = 1
    while True:
        logger.info("Checking favorites page %2d", page)
        url = favorites_url(config.api_base, config.user_id, page)
        posts = parse_page(fetch_json(session, url, rate_limiter))
        if not posts:
            break

        summary.pages += 1
        hydrated_posts = hydrate_page(posts, output_dir, metadata_dir)
        process_page(session, hydrated_posts, config, rate_limiter, logger, summary)
        page += 1

    return summary
