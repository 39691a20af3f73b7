"""
Remote document collection boundary.

The comment store talks to the backend only through ``DocumentCollection``.
``SupabaseDocumentCollection`` implements it over the PostgREST query
builder of the async Supabase client; tests use an in-memory implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from snapgram.services.async_error_handler import (
    RemoteRecordNotFoundError,
    RemoteRejectedError,
    RemoteUnavailableError,
)
from snapgram.utils.logger import store_logger

ID_FIELD = "id"


class DocumentCollection(ABC):
    """Abstract CRUD surface over named collections of records keyed by ``id``."""

    @abstractmethod
    async def create_record(self, collection: str, record_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Persist a new record and return it as stored."""

    @abstractmethod
    async def query_records(
        self,
        collection: str,
        filters: Dict[str, Any],
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> List[Dict[str, Any]]:
        """Return records whose fields equal every value in ``filters``."""

    @abstractmethod
    async def delete_record(self, collection: str, record_id: str) -> None:
        """Remove a record. Raises RemoteRecordNotFoundError if it does not exist."""

    @abstractmethod
    async def get_record(self, collection: str, record_id: str) -> Dict[str, Any]:
        """Fetch one record. Raises RemoteRecordNotFoundError if it does not exist."""


class SupabaseDocumentCollection(DocumentCollection):
    """DocumentCollection backed by Supabase tables."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def _execute(self, query, operation: str, collection: str):
        try:
            return await query.execute()
        except APIError as e:
            store_logger.error(
                f"Backend rejected {operation}", context=collection,
                code=getattr(e, "code", None), detail=getattr(e, "message", None) or str(e)
            )
            raise RemoteRejectedError(f"{operation} on {collection} was rejected", e) from e
        except httpx.HTTPError as e:
            store_logger.warning(f"Transport error during {operation}: {e}", context=collection)
            raise RemoteUnavailableError(f"{operation} on {collection} failed to reach the backend", e) from e

    async def create_record(self, collection: str, record_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        payload = {ID_FIELD: record_id, **fields}
        response = await self._execute(
            self.client.table(collection).insert(payload), "create_record", collection
        )
        rows = response.data or []
        store_logger.debug("Record created", context=collection, id=record_id)
        return rows[0] if rows else payload

    async def query_records(
        self,
        collection: str,
        filters: Dict[str, Any],
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> List[Dict[str, Any]]:
        query = self.client.table(collection).select("*")
        for field, value in filters.items():
            query = query.eq(field, value)
        if order_by:
            query = query.order(order_by, desc=not ascending)

        response = await self._execute(query, "query_records", collection)
        rows = response.data or []
        store_logger.debug("Records queried", context=collection, filters=filters, count=len(rows))
        return rows

    async def delete_record(self, collection: str, record_id: str) -> None:
        response = await self._execute(
            self.client.table(collection).delete().eq(ID_FIELD, record_id), "delete_record", collection
        )
        # PostgREST answers a delete that matched nothing with an empty representation
        if not response.data:
            raise RemoteRecordNotFoundError(f"No record {record_id} in {collection}")
        store_logger.debug("Record deleted", context=collection, id=record_id)

    async def get_record(self, collection: str, record_id: str) -> Dict[str, Any]:
        response = await self._execute(
            self.client.table(collection).select("*").eq(ID_FIELD, record_id).limit(1),
            "get_record",
            collection,
        )
        if not response.data:
            raise RemoteRecordNotFoundError(f"No record {record_id} in {collection}")
        return response.data[0]
