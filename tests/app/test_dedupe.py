"""
Tests for src/app/dedupe.py

Covers:
- Eligible iff the post has a URL and nothing exists at its media path
- Page order is preserved
"""

import tempfile
import unittest
from pathlib import Path

from src.app.dedupe import filter_downloadable, is_eligible
from src.core.models import FileData, Post
from src.core.paths import hydrate_post


def make_hydrated(root: Path, md5: str, ext: str = "png", url: str | None = "https://static.example/x"):
    post = Post(id=1, file=FileData(width=1, height=1, ext=ext, size=1, md5=md5, url=url))
    return hydrate_post(post, root, root / "metadata")


class TestDedupeFilter(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_new_post_with_url_is_eligible(self):
        self.assertTrue(is_eligible(make_hydrated(self.root, "abc123")))

    def test_existing_file_is_excluded(self):
        (self.root / "abc123.png").write_bytes(b"already here")
        hydrated = make_hydrated(self.root, "abc123", "png")
        self.assertFalse(is_eligible(hydrated))

    def test_existing_file_with_other_extension_does_not_count(self):
        (self.root / "abc123.jpg").write_bytes(b"other")
        self.assertTrue(is_eligible(make_hydrated(self.root, "abc123", "png")))

    def test_missing_url_is_excluded(self):
        self.assertFalse(is_eligible(make_hydrated(self.root, "abc123", url=None)))

    def test_empty_url_is_excluded(self):
        self.assertFalse(is_eligible(make_hydrated(self.root, "abc123", url="")))

    def test_filter_keeps_page_order(self):
        (self.root / "bbb.png").write_bytes(b"x")
        posts = [
            make_hydrated(self.root, "aaa"),
            make_hydrated(self.root, "bbb"),
            make_hydrated(self.root, "ccc", url=None),
            make_hydrated(self.root, "ddd"),
        ]
        result = filter_downloadable(posts)
        self.assertEqual([h.md5 for h in result], ["aaa", "ddd"])


if __name__ == "__main__":
    unittest.main()
