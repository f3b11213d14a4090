"""
Storage adapter: remote store first, local store as fallback.

Reads go remote -> owner-local -> shared-local. Writes go to the remote store
when an owner is known and always to the local store, so a remote outage
degrades to a warning instead of a lost save.
"""
import asyncio
import logging
from typing import Dict, List, Optional

from ..errors import StorageError
from ..portfolio.models import PortfolioData
from .json_store import SHARED_KEY, JsonLocalStore, owner_key
from .models import ANONYMOUS_OWNER, PortfolioRecord, SaveOutcome
from .remote import RemoteStore

logger = logging.getLogger(__name__)


class PortfolioStorage:
    """Persists portfolios for one application session."""

    def __init__(self, local: JsonLocalStore, remote: Optional[RemoteStore] = None):
        """Initialize the adapter.

        Args:
            local: Local key-value store, always used
            remote: Remote record store; None means local-only mode
        """
        self.local = local
        self.remote = remote
        self._lock = asyncio.Lock()
        # Remote record per owner, so repeated saves update one record
        self._record_ids: Dict[str, str] = {}

    def _local_keys(self, owner_id: Optional[str]) -> List[str]:
        keys = [owner_key(owner_id)] if owner_id else []
        return keys + [SHARED_KEY]

    async def save(self, data: PortfolioData, owner_id: Optional[str] = None) -> SaveOutcome:
        """Save a snapshot.

        Returns:
            SaveOutcome describing where the snapshot landed

        Raises:
            StorageError: If neither the remote nor the local store took it
        """
        async with self._lock:
            outcome = SaveOutcome()

            if self.remote is not None and owner_id:
                try:
                    record = await self.remote.save(data, owner_id, self._record_ids.get(owner_id))
                    self._record_ids[owner_id] = record.id
                    outcome.remote_saved = True
                    outcome.record_id = record.id
                except Exception as e:
                    logger.warning(f"Remote save failed for {owner_id}, keeping a local copy: {e}")
                    outcome.warning = f"Could not save to the server ({e}). Your portfolio was saved locally."

            try:
                for key in self._local_keys(owner_id):
                    self.local.save(key, data)
                outcome.local_saved = True
            except StorageError as e:
                logger.error(f"Local save failed: {e}")

            if not outcome.saved:
                raise StorageError("Portfolio was not saved: remote and local storage both failed")

            logger.info(
                f"Saved portfolio for {owner_id or ANONYMOUS_OWNER} "
                f"(remote={outcome.remote_saved}, local={outcome.local_saved})"
            )
            return outcome

    async def load(self, owner_id: Optional[str] = None) -> Optional[PortfolioData]:
        """Load the newest snapshot, following the fallback chain."""
        async with self._lock:
            if self.remote is not None and owner_id:
                try:
                    data = await self.remote.load(owner_id)
                    if data is not None:
                        return data
                except Exception as e:
                    logger.warning(f"Remote load failed for {owner_id}, trying local storage: {e}")

            for key in self._local_keys(owner_id):
                try:
                    data = self.local.load(key)
                except StorageError as e:
                    logger.warning(f"Skipping local entry {key}: {e}")
                    continue
                if data is not None:
                    return data
            return None

    async def list_by_owner(self, owner_id: str) -> List[PortfolioRecord]:
        """Remote records of an owner, newest first. Empty on failure."""
        if self.remote is None:
            return []
        try:
            records = await self.remote.list_by_owner(owner_id)
        except Exception as e:
            logger.warning(f"Could not list portfolios for {owner_id}: {e}")
            return []
        return sorted(records, key=lambda record: record.updated_at, reverse=True)

    async def delete(self, portfolio_id: str, owner_id: str):
        """Delete a remote record.

        Raises:
            StorageError: If there is no remote store or the delete failed
        """
        if self.remote is None:
            raise StorageError("Deleting saved portfolios requires a remote store")
        async with self._lock:
            try:
                await self.remote.delete(portfolio_id, owner_id)
            except StorageError:
                raise
            except Exception as e:
                raise StorageError(f"Could not delete portfolio {portfolio_id}: {e}") from e
            if self._record_ids.get(owner_id) == portfolio_id:
                del self._record_ids[owner_id]
            logger.info(f"Deleted portfolio {portfolio_id}")

    def clear(self, owner_id: Optional[str] = None):
        """Forget the local copies (and the session's remote record)."""
        for key in self._local_keys(owner_id):
            self.local.remove(key)
        if owner_id:
            self._record_ids.pop(owner_id, None)

    def has_saved_data(self, owner_id: Optional[str] = None) -> bool:
        try:
            return any(self.local.has(key) for key in self._local_keys(owner_id))
        except StorageError as e:
            logger.warning(f"Local storage unreadable: {e}")
            return False
