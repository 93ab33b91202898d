"""Generic database utility functions for Supabase interactions."""

import logging
from typing import Any
from uuid import UUID

from supabase import Client

from src.mockview.services.database.connection import (
    get_supabase_admin_client,
    get_supabase_client,
)

logger = logging.getLogger(__name__)


class SupabaseQueryBuilder:
    """Helper class for building and executing Supabase queries."""

    def __init__(self, client: Client | None = None) -> None:
        """
        Initialize query builder.

        Args:
            client: Supabase client instance (uses default if None)
        """
        self.client = client or get_supabase_client()

    def get_by_id(
        self, table: str, record_id: UUID | str, columns: str = "*"
    ) -> dict[str, Any] | None:
        """
        Fetch a single record by ID.

        Args:
            table: Table name
            record_id: Record UUID or ID
            columns: Columns to select (default: "*")

        Returns:
            Record dictionary or None if not found

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> interview = builder.get_by_id("interviews", interview_id)
        """
        response = self.client.table(table).select(columns).eq("id", str(record_id)).execute()
        return response.data[0] if response.data else None

    def list_records(
        self,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        exclude: dict[str, Any] | None = None,
        order_by: str | None = None,
        order_desc: bool = True,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """
        List records with optional filtering, ordering, and pagination.

        Args:
            table: Table name
            columns: Columns to select (default: "*")
            filters: Dictionary of field:value pairs that must be equal
            exclude: Dictionary of field:value pairs that must not be equal
            order_by: Column to order by
            order_desc: Order descending (default: True)
            limit: Maximum records to return
            offset: Number of records to skip

        Returns:
            List of record dictionaries

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> interviews = builder.list_records(
            ...     "interviews",
            ...     filters={"user_id": user_id},
            ...     order_by="created_at",
            ...     limit=20
            ... )
        """
        query = self.client.table(table).select(columns)

        if filters:
            for field, value in filters.items():
                query = query.eq(field, value)

        if exclude:
            for field, value in exclude.items():
                query = query.neq(field, value)

        if order_by:
            query = query.order(order_by, desc=order_desc)

        if limit is not None:
            query = query.range(offset, offset + limit - 1)

        response = query.execute()
        return response.data

    def insert_record(self, table: str, data: dict[str, Any]) -> dict[str, Any] | None:
        """
        Insert a single record and let the store assign its ID.

        Args:
            table: Table name
            data: Record data dictionary

        Returns:
            Inserted record dictionary (including the assigned ID) or None if failed

        Raises:
            Exception: If insert operation fails

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> record = builder.insert_record("feedback", {"interview_id": "abc", ...})
            >>> record["id"]
        """
        response = self.client.table(table).insert(data).execute()
        return response.data[0] if response.data else None

    def upsert_record(
        self, table: str, record: dict[str, Any], conflict_columns: list[str]
    ) -> dict[str, Any]:
        """
        Insert or update a record atomically using PostgreSQL UPSERT.

        Args:
            table: Name of the table
            record: Record data to insert/update
            conflict_columns: Column(s) to check for conflicts (e.g., ["id"])

        Returns:
            The inserted or updated record

        Raises:
            Exception: If the operation fails
        """
        try:
            result = (
                self.client.table(table)
                .upsert(record, on_conflict=",".join(conflict_columns))
                .execute()
            )
            return result.data[0]
        except Exception as e:
            logger.error(f"Failed to upsert record in {table}: {e}")
            raise

    def set_record(
        self, table: str, record_id: UUID | str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Create or overwrite the record stored under a fixed ID.

        Args:
            table: Table name
            record_id: ID the record is stored under
            data: Record data (an "id" key in data is ignored)

        Returns:
            The stored record

        Example:
            >>> builder = SupabaseQueryBuilder()
            >>> builder.set_record("feedback", "fb-123", {"total_score": 82, ...})
        """
        return self.upsert_record(table, {**data, "id": str(record_id)}, conflict_columns=["id"])


def get_query_builder(client: Client | None = None, use_admin: bool = True) -> SupabaseQueryBuilder:
    """
    Get instance of SupabaseQueryBuilder.

    Args:
        client: Optional Supabase client (uses default if None)
        use_admin: If True (default), uses admin client that bypasses RLS.
                   Set to False for operations that should respect RLS policies.

    Returns:
        SupabaseQueryBuilder instance

    Example:
        >>> db = get_query_builder()  # Uses admin client (bypasses RLS)
        >>> interview = db.get_by_id("interviews", interview_id)
    """
    if client is None:
        client = get_supabase_admin_client() if use_admin else get_supabase_client()
    return SupabaseQueryBuilder(client)
