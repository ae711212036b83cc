"""Unit tests for DatasetStorage."""

import json
import logging
import os
import stat
from datetime import datetime, timezone

import pytest

from starwatch.core.exceptions import StorageError
from starwatch.core.models import AnalyzedPost, AnalyzedStar
from starwatch.infrastructure.storage import DatasetStorage


def _star(star_id: int, starred_at: str = "2025-01-01T00:00:00Z", **extra) -> dict:
    record = {
        "id": star_id,
        "full_name": f"octo/repo-{star_id}",
        "description": None,
        "html_url": f"https://github.com/octo/repo-{star_id}",
        "stargazers_count": 5,
        "language": "Rust",
        "topics": ["cli"],
        "starred_at": starred_at,
        "commentary": "Quite the choice.",
        "analyzed_at": starred_at,
    }
    record.update(extra)
    return record


class TestLoad:
    def test_missing_file_is_empty(self, tmp_path):
        storage = DatasetStorage(tmp_path / "stars.json", AnalyzedStar)

        assert storage.load() == []

    def test_loads_records(self, tmp_path):
        path = tmp_path / "stars.json"
        path.write_text(json.dumps([_star(2, "2025-02-01T00:00:00.000Z"), _star(1)]), encoding="utf-8")

        records = DatasetStorage(path, AnalyzedStar).load()

        assert [r.id for r in records] == [2, 1]
        assert records[0].starred_at == datetime(2025, 2, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("content", ["", "{not json", '{"id": 1}', "null"])
    def test_corrupt_file_is_treated_as_empty(self, tmp_path, content):
        path = tmp_path / "stars.json"
        path.write_text(content, encoding="utf-8")

        assert DatasetStorage(path, AnalyzedStar).load() == []

    def test_invalid_record_is_skipped_and_rest_kept(self, tmp_path, caplog):
        path = tmp_path / "stars.json"
        broken = _star(2)
        del broken["commentary"]
        path.write_text(json.dumps([_star(1), broken, _star(3)]), encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            records = DatasetStorage(path, AnalyzedStar).load()

        assert [r.id for r in records] == [1, 3]
        assert records[0].starred_at == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert "Skipping invalid record #1" in caplog.text

    def test_non_object_entry_is_skipped(self, tmp_path):
        path = tmp_path / "stars.json"
        path.write_text(json.dumps([_star(1), "junk", 7]), encoding="utf-8")

        assert [r.id for r in DatasetStorage(path, AnalyzedStar).load()] == [1]


class TestSave:
    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "public" / "data" / "stars.json"
        storage = DatasetStorage(path, AnalyzedStar)

        storage.save([AnalyzedStar(**_star(1))])

        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8"))[0]["id"] == 1

    def test_writes_pretty_printed_array(self, tmp_path):
        path = tmp_path / "stars.json"
        DatasetStorage(path, AnalyzedStar).save([AnalyzedStar(**_star(1))])

        text = path.read_text(encoding="utf-8")

        assert text.startswith("[\n  {\n")
        data = json.loads(text)
        assert data[0]["starred_at"] == "2025-01-01T00:00:00Z"
        assert set(data[0]) == {
            "id",
            "full_name",
            "description",
            "html_url",
            "stargazers_count",
            "language",
            "topics",
            "starred_at",
            "commentary",
            "analyzed_at",
        }

    def test_overwrites_whole_file(self, tmp_path):
        path = tmp_path / "stars.json"
        storage = DatasetStorage(path, AnalyzedStar)
        storage.save([AnalyzedStar(**_star(1)), AnalyzedStar(**_star(2))])

        storage.save([AnalyzedStar(**_star(3))])

        assert [r["id"] for r in json.loads(path.read_text(encoding="utf-8"))] == [3]
        assert list(tmp_path.iterdir()) == [path]

    def test_saved_file_follows_umask(self, tmp_path):
        path = tmp_path / "stars.json"
        previous = os.umask(0o022)
        try:
            DatasetStorage(path, AnalyzedStar).save([AnalyzedStar(**_star(1))])
        finally:
            os.umask(previous)

        mode = stat.S_IMODE(path.stat().st_mode)
        assert mode == 0o644
        assert mode & stat.S_IRGRP
        assert mode & stat.S_IROTH

    def test_round_trip_preserves_unknown_fields(self, tmp_path):
        path = tmp_path / "stars.json"
        path.write_text(json.dumps([_star(1, mood="smug")]), encoding="utf-8")
        storage = DatasetStorage(path, AnalyzedStar)

        storage.save(storage.load())

        assert json.loads(path.read_text(encoding="utf-8"))[0]["mood"] == "smug"

    def test_keeps_non_ascii_text(self, tmp_path):
        path = tmp_path / "posts.json"
        post = AnalyzedPost(
            id="p1",
            title="Café",
            url="https://x/p1",
            published_at="2025-01-01T00:00:00Z",
            summary="Résumé",
            ai_analysis="a",
            ai_predictions="p",
            analyzed_at="2025-01-02T00:00:00Z",
        )

        DatasetStorage(path, AnalyzedPost).save([post])

        assert "Résumé" in path.read_text(encoding="utf-8")

    def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        storage = DatasetStorage(blocker / "stars.json", AnalyzedStar)

        with pytest.raises(StorageError):
            storage.save([AnalyzedStar(**_star(1))])
