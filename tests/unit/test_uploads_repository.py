from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import psycopg
import pytest

from app.database.exceptions import DatabaseError, RecordNotFoundError
from app.database.models import NewUpload, UploadRecord
from app.database.repositories.uploads_repository import UploadsRepository

RECORD_ID = "550e8400-e29b-41d4-a716-446655440000"
CREATED_AT = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def _make_row(**overrides: object) -> dict:
    row: dict[str, object] = {
        "id": RECORD_ID,
        "image_url": "http://localhost:9000/uploads/abc.png",
        "storage_path": "abc.png",
        "extracted_text": "Hello",
        "file_name": "scan.png",
        "file_size": 2048,
        "mime_type": "image/png",
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }
    row.update(overrides)
    return row


def _new_upload() -> NewUpload:
    return NewUpload(
        image_url="http://localhost:9000/uploads/abc.png",
        storage_path="abc.png",
        extracted_text="Hello",
        file_name="scan.png",
        file_size=2048,
        mime_type="image/png",
    )


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    """Wire up a mock connection + cursor and return (mock_conn, mock_cursor)."""
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


class TestInsert:
    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_returns_record_from_returned_row(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row()

        record = UploadsRepository().insert(_new_upload())

        assert isinstance(record, UploadRecord)
        assert record.id == RECORD_ID
        assert record.storage_path == "abc.png"
        assert record.created_at == CREATED_AT

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_executes_insert_and_commits(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row()

        UploadsRepository().insert(_new_upload())

        sql, params = mock_cursor.execute.call_args.args
        assert "INSERT INTO uploads" in sql
        assert "RETURNING" in sql
        assert params == (
            "http://localhost:9000/uploads/abc.png",
            "abc.png",
            "Hello",
            "scan.png",
            2048,
            "image/png",
        )
        mock_conn.commit.assert_called_once()

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_wraps_driver_errors(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.execute.side_effect = psycopg.OperationalError("connection lost")

        with pytest.raises(DatabaseError, match="Database insert failed: connection lost"):
            UploadsRepository().insert(_new_upload())


class TestListAll:
    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_orders_newest_first(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = [_make_row(), _make_row(id="other")]

        records = UploadsRepository().list_all()

        sql = mock_cursor.execute.call_args.args[0]
        assert "ORDER BY created_at DESC" in sql
        assert [r.id for r in records] == [RECORD_ID, "other"]

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_returns_empty_list(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = []

        assert UploadsRepository().list_all() == []

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_wraps_driver_errors(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.execute.side_effect = psycopg.errors.QueryCanceled("statement timeout")

        with pytest.raises(DatabaseError, match="Database query failed"):
            UploadsRepository().list_all()


class TestFindStoragePath:
    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_returns_storage_path(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = ("abc.png",)

        assert UploadsRepository().find_storage_path(RECORD_ID) == "abc.png"
        _sql, params = mock_cursor.execute.call_args.args
        assert params == (RECORD_ID,)

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_raises_not_found_when_missing(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        with pytest.raises(RecordNotFoundError, match=f"Record {RECORD_ID} not found"):
            UploadsRepository().find_storage_path(RECORD_ID)

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_malformed_id_is_not_found_without_query(self, mock_get_conn: MagicMock) -> None:
        with pytest.raises(RecordNotFoundError):
            UploadsRepository().find_storage_path("not-a-uuid")
        mock_get_conn.assert_not_called()


class TestDelete:
    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_deletes_and_commits(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.rowcount = 1

        UploadsRepository().delete(RECORD_ID)

        sql, params = mock_cursor.execute.call_args.args
        assert "DELETE FROM uploads" in sql
        assert params == (RECORD_ID,)
        mock_conn.commit.assert_called_once()

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_raises_not_found_when_no_rows_deleted(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.rowcount = 0

        with pytest.raises(RecordNotFoundError):
            UploadsRepository().delete(RECORD_ID)

    @patch("app.database.repositories.uploads_repository.get_connection")
    def test_wraps_driver_errors(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.execute.side_effect = psycopg.OperationalError("server closed")

        with pytest.raises(DatabaseError, match="Database delete failed"):
            UploadsRepository().delete(RECORD_ID)
