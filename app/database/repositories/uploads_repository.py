import uuid
from typing import Any

import psycopg
from psycopg.rows import dict_row

from app.database.connection import get_connection
from app.database.exceptions import DatabaseError, RecordNotFoundError
from app.database.models import NewUpload, UploadRecord
from app.database.repositories.base import BaseUploadsRepository

_COLUMNS = """
    id, image_url, storage_path, extracted_text, file_name,
    file_size, mime_type, created_at, updated_at
"""


def _parse_id(record_id: str) -> str:
    try:
        return str(uuid.UUID(record_id))
    except (ValueError, TypeError, AttributeError) as exc:
        raise RecordNotFoundError(f"Record {record_id} not found") from exc


def _row_to_record(row: dict[str, Any]) -> UploadRecord:
    return UploadRecord(
        id=str(row["id"]),
        image_url=row["image_url"],
        storage_path=row["storage_path"],
        extracted_text=row["extracted_text"],
        file_name=row["file_name"],
        file_size=row["file_size"],
        mime_type=row["mime_type"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class UploadsRepository(BaseUploadsRepository):
    """Database operations for the uploads table."""

    def insert(self, new_upload: NewUpload) -> UploadRecord:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO uploads
                            (image_url, storage_path, extracted_text,
                             file_name, file_size, mime_type)
                        VALUES (%s, %s, %s, %s, %s, %s)
                        RETURNING {_COLUMNS}
                        """,
                        (
                            new_upload.image_url,
                            new_upload.storage_path,
                            new_upload.extracted_text,
                            new_upload.file_name,
                            new_upload.file_size,
                            new_upload.mime_type,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise DatabaseError(f"Database insert failed: {exc}") from exc

        if row is None:
            raise DatabaseError("Database insert failed: no row returned")
        return _row_to_record(row)

    def list_all(self) -> list[UploadRecord]:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        SELECT {_COLUMNS}
                        FROM uploads
                        ORDER BY created_at DESC
                        """
                    )
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise DatabaseError(f"Database query failed: {exc}") from exc

        return [_row_to_record(row) for row in rows]

    def find_storage_path(self, record_id: str) -> str:
        parsed_id = _parse_id(record_id)
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        "SELECT storage_path FROM uploads WHERE id = %s",
                        (parsed_id,),
                    )
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise DatabaseError(f"Database query failed: {exc}") from exc

        if row is None:
            raise RecordNotFoundError(f"Record {record_id} not found")
        return row[0]

    def delete(self, record_id: str) -> None:
        parsed_id = _parse_id(record_id)
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM uploads WHERE id = %s", (parsed_id,))
                    deleted = cur.rowcount
                conn.commit()
        except psycopg.Error as exc:
            raise DatabaseError(f"Database delete failed: {exc}") from exc

        if deleted == 0:
            raise RecordNotFoundError(f"Record {record_id} not found")
