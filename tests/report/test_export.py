"""
Tests for src/report/export.py

Covers:
- Pretty-printed JSON with the full post and its hydrated paths
- Existing metadata is overwritten
- An unwritable destination is reported, not raised
"""

import json
import logging
import tempfile
import unittest
from pathlib import Path

from src.core.models import FileData, Flags, Post, Tags
from src.core.paths import hydrate_post
from src.report.export import export_json


def make_hydrated(root: Path, metadata_root: Path):
    post = Post(
        id=7,
        file=FileData(width=3, height=4, ext="jpg", size=12, md5="def456", url="https://static.example/def456.jpg"),
        created_at="2023-05-01T10:00:00.000-04:00",
        updated_at="2023-05-02T10:00:00.000-04:00",
        tags=Tags(general=["café"], lore=["backstory"]),
        rating="q",
        flags=Flags(pending=True),
    )
    return hydrate_post(post, root, metadata_root)


class TestExportJson(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.metadata_root = self.root / "metadata"
        self.metadata_root.mkdir()
        self.logger = logging.getLogger("favarchive.tests")

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_writes_full_record(self):
        hydrated = make_hydrated(self.root, self.metadata_root)

        self.assertTrue(export_json(hydrated, self.logger))

        text = (self.metadata_root / "def456.json").read_text(encoding="utf-8")
        self.assertIn('\n  "id": 7', text)
        self.assertIn("café", text)
        data = json.loads(text)
        self.assertEqual(data["file"]["url"], "https://static.example/def456.jpg")
        self.assertEqual(data["tags"]["lore"], ["backstory"])
        self.assertEqual(data["tags"]["species"], [])
        self.assertTrue(data["flags"]["pending"])
        self.assertEqual(data["rating"], "q")
        self.assertEqual(data["file_path"], str(self.root / "def456.jpg"))
        self.assertEqual(data["tags_path"], str(self.metadata_root / "def456.json"))

    def test_overwrites_existing_record(self):
        target = self.metadata_root / "def456.json"
        target.write_text(json.dumps({"stale": True, "notes": "x" * 500}), encoding="utf-8")

        export_json(make_hydrated(self.root, self.metadata_root), self.logger)

        data = json.loads(target.read_text(encoding="utf-8"))
        self.assertNotIn("stale", data)
        self.assertEqual(data["id"], 7)

    def test_missing_directory_is_reported(self):
        hydrated = make_hydrated(self.root, self.root / "nowhere")

        with self.assertLogs("favarchive.tests", level="ERROR"):
            self.assertFalse(export_json(hydrated, self.logger))
        self.assertFalse((self.root / "nowhere").exists())


if __name__ == "__main__":
    unittest.main()
