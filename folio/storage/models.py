"""
Data models for portfolio storage.
"""
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from ..portfolio.models import PortfolioData

ANONYMOUS_OWNER = "anonymous"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PortfolioRecord(BaseModel):
    """A portfolio saved in the remote record table."""
    id: str = Field(default_factory=lambda: uuid4().hex)
    owner_id: str
    data: PortfolioData
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class RecordTable(BaseModel):
    """On-disk shape of the record table file."""
    records: List[PortfolioRecord] = []


class SaveOutcome(BaseModel):
    """Where a save landed.

    ``warning`` is set when the remote store failed and the portfolio was
    only kept locally.
    """
    remote_saved: bool = False
    local_saved: bool = False
    record_id: Optional[str] = None
    warning: Optional[str] = None

    @property
    def saved(self) -> bool:
        return self.remote_saved or self.local_saved
