"""
Store configuration and connection management for Supabase
"""
import logging
from typing import Any, Dict, Optional, Protocol

from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from leadcapture.errors import ServerConfigError, StoreWriteError

logger = logging.getLogger(__name__)


class LeadStore(Protocol):
    """Anything that can insert one record into a named table.

    Implementations raise ``StoreWriteError`` when the store rejects the row.
    """

    async def insert(self, table: str, record: Dict[str, Any]) -> None:
        ...


class SupabaseLeadStore:
    """Supabase (PostgREST) backed store"""

    def __init__(self, url: Optional[str], service_role_key: Optional[str]):
        self.url = url
        self.service_role_key = service_role_key
        self.client: Optional[AsyncClient] = None

    async def connect(self) -> AsyncClient:
        """Create the Supabase client once and reuse it for every insert"""
        if self.client is not None:
            return self.client
        if not self.url or not self.service_role_key:
            raise ServerConfigError()
        try:
            self.client = await acreate_client(self.url, self.service_role_key)
        except Exception as exc:
            logger.error("❌ Could not create Supabase client for %s: %s", self.url, exc)
            raise ServerConfigError() from exc
        print(f"✅ Supabase client ready: {self.url}")
        return self.client

    async def insert(self, table: str, record: Dict[str, Any]) -> None:
        client = await self.connect()
        try:
            await client.table(table).insert(record).execute()
        except APIError as exc:
            raise StoreWriteError(detail=str(exc)) from exc

    async def close(self):
        """Close the PostgREST HTTP session and drop the client"""
        if self.client is not None:
            await self.client.postgrest.aclose()
            self.client = None
            print("✅ Supabase client released")
