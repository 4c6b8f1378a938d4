from pathlib import Path


def format_size(size_bytes: int) -> str:
    """Human-readable file size (e.g. "3.50 MB", "125.0 KB")."""
    if size_bytes is None or size_bytes < 0:
        return "? bytes"
    # KB for small files, MB for larger
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.2f} MB"


def plural(count: int, word: str) -> str:
    if count == 1:
        return f"1 {word}"
    return f"{count} {word}s"


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)
