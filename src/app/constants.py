"""
Constants and data classes used across the pipeline modules.

This file contains:
- USER_AGENT: Client identifier sent with every request
- DEFAULT_API_BASE / DEFAULT_SLEEP_SECONDS: CLI defaults
- TAG_CATEGORIES: The fixed tag groups of a post
- WalkConfig: Settings for one archive run
"""

from dataclasses import dataclass
from pathlib import Path


# =============================================================================
# CONSTANTS
# =============================================================================

USER_AGENT = "favarchive/1.0 (https://github.com/favarchive/favarchive)"

DEFAULT_API_BASE = "https://e621.net"
DEFAULT_SLEEP_SECONDS = 1.5              # Pause between two requests of the same kind
METADATA_DIRNAME = "metadata"            # Subfolder of the output dir holding <md5>.json
LOG_LEVEL_ENV = "FAVARCHIVE_LOG_LEVEL"

TAG_CATEGORIES = (
    "general",
    "species",
    "character",
    "copyright",
    "artist",
    "invalid",
    "lore",
    "meta",
)

DONE_MESSAGE = "Done! Enjoy that offline archive!"


@dataclass
class WalkConfig:
    """Everything the page walker needs for one run."""
    user_id: int
    output_dir: Path
    api_base: str = DEFAULT_API_BASE
    sleep_seconds: float = DEFAULT_SLEEP_SECONDS
    dry_run: bool = False

    @property
    def metadata_dir(self) -> Path:
        return self.output_dir / METADATA_DIRNAME
