import argparse
from pathlib import Path
from typing import Iterable

import requests

from .constants import DEFAULT_API_BASE, DEFAULT_SLEEP_SECONDS, DONE_MESSAGE, WalkConfig
from .logging_utils import setup_logging
from .pipeline import walk_favorites
from .verify import verify_archive
from ..infra.http import create_session
from ..infra.parser import PageDecodeError
from ..report.reporting import analyze_archive


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Archive a user's favorites (media + JSON metadata)")
    parser.add_argument("-u", "--user-id", type=int, required=True, help="Numeric id of the user whose favorites to archive")
    parser.add_argument("-d", "--directory", required=True, help="Output folder")
    parser.add_argument("-a", "--analyze", action="store_true", help="Print tag statistics of the archive when done")
    parser.add_argument("--api-base", default=DEFAULT_API_BASE, help="API root URL")
    parser.add_argument("--sleep", type=float, default=DEFAULT_SLEEP_SECONDS, help="Delay between requests (seconds)")
    parser.add_argument("--dry-run", action="store_true", help="Walk the favorites and list downloads without fetching")
    parser.add_argument(
        "--summary-report",
        nargs="?",
        const="summary-report.json",
        default=None,
        help="Write summary report JSON to PATH (default: summary-report.json)",
    )
    parser.add_argument("--verify", action="store_true", help="Check the archive in --directory and report missing media")
    parser.add_argument("--log-level", default=None, help="Console log level (default: $FAVARCHIVE_LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default=None, help="Also write a debug log to PATH")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> WalkConfig:
    return WalkConfig(
        user_id=args.user_id,
        output_dir=Path(args.directory),
        api_base=args.api_base,
        sleep_seconds=args.sleep,
        dry_run=args.dry_run,
    )


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(args.log_level, Path(args.log_file) if args.log_file else None)
    config = build_config(args)

    if args.verify:
        status = verify_archive(config.output_dir, logger)
        if args.analyze and config.metadata_dir.exists():
            analyze_archive(config.metadata_dir, logger)
        return status

    session = create_session()
    try:
        summary = walk_favorites(session, config, logger)
    except (requests.RequestException, PageDecodeError) as exc:
        logger.error("Aborting: could not fetch favorites: %s", exc)
        return 1
    finally:
        session.close()

    summary.log_summary(logger)
    if args.summary_report:
        summary.write_summary(Path(args.summary_report))
        logger.info("Summary report: %s", args.summary_report)

    if args.analyze:
        analyze_archive(config.metadata_dir, logger)

    print(DONE_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
