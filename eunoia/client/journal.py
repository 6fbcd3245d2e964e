"""Journal entry endpoints."""

import logging

from eunoia.client.base import BaseApiClient, parse_model
from eunoia.models.wellness import JournalEntry, JournalEntryInput, JournalPage, JournalStats

logger = logging.getLogger(__name__)


def parse_tags(raw: str) -> list[str]:
    """Split comma-separated form input into tags, dropping blanks."""
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


class JournalApiClient(BaseApiClient):
    """CRUD and statistics for journal entries.

    All methods raise ``AuthenticationRequired`` when no usable token is
    stored and ``ApiError`` on any other failure.
    """

    async def create_entry(self, entry: JournalEntryInput) -> JournalEntry:
        data = await self.request_json("POST", "/entries", json=entry.model_dump())
        created = parse_model(JournalEntry, data)
        logger.info(f"Created journal entry {created.id}")
        return created

    async def list_entries(
        self,
        page: int | None = None,
        limit: int | None = None,
        mood: str | None = None,
        search: str | None = None,
    ) -> JournalPage:
        """List entries, optionally filtered.

        Args:
            page: 1-based page number.
            limit: Entries per page.
            mood: Only entries with this mood.
            search: Free-text filter.

        Returns:
            The requested page and the total page count.
        """
        params = {
            key: value
            for key, value in (("page", page), ("limit", limit), ("mood", mood), ("search", search))
            if value
        }
        data = await self.request_json("GET", "/entries", params=params)
        return parse_model(JournalPage, data)

    async def get_entry(self, entry_id: str) -> JournalEntry:
        data = await self.request_json("GET", f"/entries/{entry_id}")
        return parse_model(JournalEntry, data)

    async def update_entry(self, entry_id: str, entry: JournalEntryInput) -> JournalEntry:
        data = await self.request_json("PUT", f"/entries/{entry_id}", json=entry.model_dump())
        return parse_model(JournalEntry, data)

    async def delete_entry(self, entry_id: str) -> None:
        await self.request_json("DELETE", f"/entries/{entry_id}")
        logger.info(f"Deleted journal entry {entry_id}")

    async def get_stats(self) -> JournalStats:
        data = await self.request_json("GET", "/entries/stats")
        return parse_model(JournalStats, data)
