"""Tests for shared/repository.py."""

from datetime import datetime
from unittest.mock import MagicMock

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_subclass_can_access_db(self):
        """Subclass should be able to access _db and use it."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                result = self._db.table("test").select("*").execute()
                return result.data

        repo = TestRepository(mock_db)
        result = repo.get_all()

        assert result == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_once_with("test")

    def test_first_returns_first_row(self):
        """_first should return the first row of a result."""
        result = MagicMock()
        result.data = [{"id": "a"}, {"id": "b"}]
        assert BaseRepository._first(result) == {"id": "a"}

    def test_first_returns_none_when_empty(self):
        """_first should return None for an empty result."""
        result = MagicMock()
        result.data = []
        assert BaseRepository._first(result) is None

    def test_now_is_utc_iso(self):
        """_now should produce a timezone-aware ISO timestamp."""
        parsed = datetime.fromisoformat(BaseRepository._now())
        assert parsed.utcoffset().total_seconds() == 0
