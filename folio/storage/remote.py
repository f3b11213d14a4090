"""
Remote portfolio store.

``RemoteStore`` is the CRUD-by-id boundary the storage adapter talks to.
``JsonRecordStore`` implements it over a JSON file holding the record table;
with ``persist=False`` the records live only as long as the instance.
"""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..errors import StorageError
from ..portfolio.models import PortfolioData
from ..utils.files import atomic_write
from .models import PortfolioRecord, RecordTable, utcnow

logger = logging.getLogger(__name__)


class RemoteStore(ABC):
    """Remote record table keyed by portfolio id and owner."""

    @abstractmethod
    async def save(
        self,
        data: PortfolioData,
        owner_id: str,
        portfolio_id: Optional[str] = None
    ) -> PortfolioRecord:
        """Create a record, or update ``portfolio_id`` when given."""

    @abstractmethod
    async def load(self, owner_id: str) -> Optional[PortfolioData]:
        """Most recently updated portfolio of an owner."""

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[PortfolioRecord]:
        """All records of an owner."""

    @abstractmethod
    async def delete(self, portfolio_id: str, owner_id: str):
        """Remove one record owned by ``owner_id``."""


class JsonRecordStore(RemoteStore):
    """Record table stored in a single JSON file."""

    def __init__(self, path: str = "data/remote/portfolios.json", persist: bool = True):
        """Initialize the record store.

        Args:
            path: JSON file holding the record table
            persist: Write every change to ``path``. When False the table is
                loaded once and then kept in memory only.
        """
        self.path = Path(path)
        self.persist = persist
        self._records: Dict[str, PortfolioRecord] = {}
        self._load_records()

    def _load_records(self):
        """Load the record table file if it exists."""
        if not self.path.exists() or self.path.stat().st_size == 0:
            return
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                table = RecordTable(**json.load(f))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise StorageError(f"Could not read record table {self.path}: {e}") from e
        self._records = {record.id: record for record in table.records}

    def _commit(self, records: Dict[str, PortfolioRecord]):
        """Write a new record table, then make it current.

        The in-memory table is left as it was when the write fails.
        """
        if self.persist:
            table = RecordTable(records=list(records.values()))
            try:
                atomic_write(self.path, table.model_dump_json(indent=2, by_alias=True))
            except OSError as e:
                raise StorageError(f"Could not write record table {self.path}: {e}") from e
        self._records = records

    def _owned(self, portfolio_id: str, owner_id: str) -> PortfolioRecord:
        record = self._records.get(portfolio_id)
        if record is None or record.owner_id != owner_id:
            raise StorageError(f"Portfolio {portfolio_id} not found for owner {owner_id}")
        return record

    async def save(
        self,
        data: PortfolioData,
        owner_id: str,
        portfolio_id: Optional[str] = None
    ) -> PortfolioRecord:
        if portfolio_id and portfolio_id in self._records:
            existing = self._owned(portfolio_id, owner_id)
            record = existing.model_copy(update={"data": data, "updated_at": utcnow()})
        elif portfolio_id:
            record = PortfolioRecord(id=portfolio_id, owner_id=owner_id, data=data)
        else:
            record = PortfolioRecord(owner_id=owner_id, data=data)
        self._commit({**self._records, record.id: record})
        logger.debug(f"Saved record {record.id} for {owner_id}")
        return record

    async def load(self, owner_id: str) -> Optional[PortfolioData]:
        records = await self.list_by_owner(owner_id)
        return records[0].data if records else None

    async def list_by_owner(self, owner_id: str) -> List[PortfolioRecord]:
        records = [record for record in self._records.values() if record.owner_id == owner_id]
        return sorted(records, key=lambda record: record.updated_at, reverse=True)

    async def delete(self, portfolio_id: str, owner_id: str):
        self._owned(portfolio_id, owner_id)
        self._commit({key: record for key, record in self._records.items() if key != portfolio_id})
        logger.debug(f"Deleted record {portfolio_id}")
