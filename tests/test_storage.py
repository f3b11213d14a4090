"""
Tests for storage functionality.
"""
import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from folio.errors import StorageError
from folio.storage.adapter import PortfolioStorage
from folio.storage.json_store import SHARED_KEY, JsonLocalStore, owner_key
from folio.storage.remote import JsonRecordStore


@pytest.fixture
def temp_storage_dir(tmp_path):
    """Create a temporary storage directory for testing."""
    storage_dir = tmp_path / "test_storage"
    storage_dir.mkdir()
    return storage_dir


@pytest.fixture
def temp_backup_dir(tmp_path):
    """Create a temporary backup directory for testing."""
    backup_dir = tmp_path / "test_backups"
    backup_dir.mkdir()
    return backup_dir


@pytest.fixture
def local_store(temp_storage_dir):
    return JsonLocalStore(str(temp_storage_dir))


@pytest.fixture
def record_store(tmp_path):
    return JsonRecordStore(str(tmp_path / "remote" / "portfolios.json"))


@pytest.fixture
def failing_remote():
    """A remote store whose every call fails."""
    remote = MagicMock()
    remote.save = AsyncMock(side_effect=ConnectionError("server unreachable"))
    remote.load = AsyncMock(side_effect=ConnectionError("server unreachable"))
    remote.list_by_owner = AsyncMock(side_effect=ConnectionError("server unreachable"))
    remote.delete = AsyncMock(side_effect=ConnectionError("server unreachable"))
    return remote


def rename(data, name):
    return data.model_copy(update={"personal_info": data.personal_info.model_copy(update={"name": name})})


# Local store

def test_local_store_initialization(temp_storage_dir):
    """Test local store initialization."""
    store = JsonLocalStore(str(temp_storage_dir))
    assert (temp_storage_dir / "portfolios.json").exists()
    assert store.keys() == []


def test_local_store_save_and_load(local_store, sample_data):
    local_store.save(SHARED_KEY, sample_data)

    assert local_store.has(SHARED_KEY)
    assert local_store.load(SHARED_KEY) == sample_data
    assert local_store.load("missing") is None

    # Stored in the camelCase wire format
    with open(local_store.entries_file, 'r') as f:
        entries = json.load(f)
    assert entries[SHARED_KEY]["personalInfo"]["jobTitle"] == "Computer Scientist"


def test_local_store_remove(local_store, sample_data):
    local_store.save(SHARED_KEY, sample_data)
    local_store.save(owner_key("u1"), sample_data)
    local_store.remove(SHARED_KEY)
    assert local_store.keys() == [owner_key("u1")]
    local_store.remove("missing")


def test_owner_key():
    assert owner_key("u1") == "portfolioData_u1"
    assert SHARED_KEY == "portfolioData"


def test_local_store_corrupt_entry(local_store):
    with open(local_store.entries_file, 'w') as f:
        json.dump({SHARED_KEY: {"skills": "not-a-list"}}, f)
    with pytest.raises(StorageError):
        local_store.load(SHARED_KEY)


def test_local_store_unreadable_file(local_store):
    local_store.entries_file.write_text("{not json")
    with pytest.raises(StorageError):
        local_store.keys()


def test_backup_and_restore(local_store, temp_backup_dir, sample_data):
    """Test backup creation and restoration."""
    local_store.save(SHARED_KEY, sample_data)

    backup_dir = local_store.backup(str(temp_backup_dir))

    assert (backup_dir / "portfolios.json").exists()
    assert (backup_dir / "backup_info.json").exists()
    with open(backup_dir / "backup_info.json", 'r') as f:
        info = json.load(f)
    assert info["num_entries"] == 1
    assert info["keys"] == [SHARED_KEY]

    # Change the data, then restore
    local_store.save(SHARED_KEY, rename(sample_data, "Changed"))
    local_store.save(owner_key("u1"), sample_data)
    local_store.restore_from_backup(str(backup_dir))

    assert local_store.keys() == [SHARED_KEY]
    assert local_store.load(SHARED_KEY) == sample_data


def test_backup_cleanup(local_store, temp_backup_dir, sample_data):
    """Test backup cleanup when exceeding max_backups limit."""
    local_store.save(SHARED_KEY, sample_data)
    for _ in range(6):
        local_store.backup(str(temp_backup_dir), max_backups=5)

    backup_dirs = [d for d in temp_backup_dir.iterdir() if d.is_dir() and d.name.startswith("backup_")]
    assert len(backup_dirs) == 5


def test_restore_nonexistent_backup(local_store):
    """Test restoring from a non-existent backup."""
    with pytest.raises(ValueError):
        local_store.restore_from_backup("nonexistent_backup")


# Remote record store

@pytest.mark.asyncio
async def test_record_store_create_and_update(record_store, sample_data):
    created = await record_store.save(sample_data, "u1")
    updated = await record_store.save(rename(sample_data, "Updated"), "u1", created.id)

    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    records = await record_store.list_by_owner("u1")
    assert len(records) == 1
    assert records[0].data.personal_info.name == "Updated"


@pytest.mark.asyncio
async def test_record_store_lists_newest_first(record_store, sample_data):
    first = await record_store.save(rename(sample_data, "First"), "u1")
    await asyncio.sleep(0.01)
    second = await record_store.save(rename(sample_data, "Second"), "u1")
    await record_store.save(sample_data, "someone-else")

    records = await record_store.list_by_owner("u1")
    assert [r.id for r in records] == [second.id, first.id]
    assert (await record_store.load("u1")).personal_info.name == "Second"
    assert await record_store.load("nobody") is None


@pytest.mark.asyncio
async def test_record_store_delete_checks_owner(record_store, sample_data):
    record = await record_store.save(sample_data, "u1")

    with pytest.raises(StorageError):
        await record_store.delete(record.id, "u2")
    with pytest.raises(StorageError):
        await record_store.save(sample_data, "u2", record.id)

    await record_store.delete(record.id, "u1")
    assert await record_store.list_by_owner("u1") == []
    with pytest.raises(StorageError):
        await record_store.delete(record.id, "u1")


@pytest.mark.asyncio
async def test_record_store_persistence(tmp_path, sample_data):
    """Test that persist=True survives a new instance and persist=False does not write."""
    path = tmp_path / "remote.json"
    record = await JsonRecordStore(str(path)).save(sample_data, "u1")

    reopened = JsonRecordStore(str(path))
    assert (await reopened.list_by_owner("u1"))[0].id == record.id
    assert (await reopened.load("u1")) == sample_data

    memory_path = tmp_path / "memory.json"
    memory = JsonRecordStore(str(memory_path), persist=False)
    await memory.save(sample_data, "u1")
    assert len(await memory.list_by_owner("u1")) == 1
    assert not memory_path.exists()


def test_record_store_corrupt_file(tmp_path):
    path = tmp_path / "remote.json"
    path.write_text("{broken")
    with pytest.raises(StorageError):
        JsonRecordStore(str(path))


# Adapter

@pytest.mark.asyncio
async def test_anonymous_save_is_local_only(local_store, record_store, sample_data):
    storage = PortfolioStorage(local_store, remote=record_store)
    outcome = await storage.save(sample_data)

    assert outcome.local_saved
    assert not outcome.remote_saved
    assert outcome.warning is None
    assert local_store.keys() == [SHARED_KEY]
    assert await storage.load() == sample_data


@pytest.mark.asyncio
async def test_owner_save_writes_remote_and_both_local_keys(local_store, record_store, sample_data):
    storage = PortfolioStorage(local_store, remote=record_store)
    outcome = await storage.save(sample_data, "u1")

    assert outcome.remote_saved and outcome.local_saved
    assert outcome.record_id is not None
    assert sorted(local_store.keys()) == sorted([SHARED_KEY, owner_key("u1")])

    # Later saves in the session update the same record
    again = await storage.save(rename(sample_data, "Again"), "u1")
    assert again.record_id == outcome.record_id
    assert len(await storage.list_by_owner("u1")) == 1


@pytest.mark.asyncio
async def test_remote_failure_falls_back_to_local(local_store, failing_remote, sample_data):
    storage = PortfolioStorage(local_store, remote=failing_remote)
    outcome = await storage.save(sample_data, "u1")

    assert not outcome.remote_saved
    assert outcome.local_saved
    assert "server unreachable" in outcome.warning
    assert local_store.load(owner_key("u1")) == sample_data


@pytest.mark.asyncio
async def test_save_fails_when_everything_fails(local_store, failing_remote, sample_data):
    local_store.save = MagicMock(side_effect=StorageError("disk full"))
    storage = PortfolioStorage(local_store, remote=failing_remote)

    with pytest.raises(StorageError):
        await storage.save(sample_data, "u1")


@pytest.mark.asyncio
async def test_load_fallback_chain(local_store, record_store, failing_remote, sample_data):
    """Test remote -> owner-local -> shared-local."""
    remote_copy = rename(sample_data, "Remote")
    owner_copy = rename(sample_data, "Owner")
    shared_copy = rename(sample_data, "Shared")

    await record_store.save(remote_copy, "u1")
    local_store.save(owner_key("u1"), owner_copy)
    local_store.save(SHARED_KEY, shared_copy)

    assert await PortfolioStorage(local_store, remote=record_store).load("u1") == remote_copy
    assert await PortfolioStorage(local_store, remote=failing_remote).load("u1") == owner_copy
    assert await PortfolioStorage(local_store).load("u2") == shared_copy
    assert await PortfolioStorage(local_store).load() == shared_copy


@pytest.mark.asyncio
async def test_load_skips_corrupt_owner_entry(local_store, sample_data):
    local_store.save(SHARED_KEY, sample_data)
    entries = json.loads(local_store.entries_file.read_text())
    entries[owner_key("u1")] = {"projects": "garbage"}
    local_store.entries_file.write_text(json.dumps(entries))

    assert await PortfolioStorage(local_store).load("u1") == sample_data


@pytest.mark.asyncio
async def test_load_nothing_saved(local_store):
    assert await PortfolioStorage(local_store).load("u1") is None


@pytest.mark.asyncio
async def test_list_by_owner_failure_returns_empty(local_store, failing_remote):
    assert await PortfolioStorage(local_store, remote=failing_remote).list_by_owner("u1") == []
    assert await PortfolioStorage(local_store).list_by_owner("u1") == []


@pytest.mark.asyncio
async def test_delete(local_store, record_store, failing_remote, sample_data):
    storage = PortfolioStorage(local_store, remote=record_store)
    outcome = await storage.save(sample_data, "u1")
    await storage.delete(outcome.record_id, "u1")
    assert await storage.list_by_owner("u1") == []

    with pytest.raises(StorageError):
        await PortfolioStorage(local_store).delete("any", "u1")
    with pytest.raises(StorageError):
        await PortfolioStorage(local_store, remote=failing_remote).delete("any", "u1")


@pytest.mark.asyncio
async def test_clear_and_has_saved_data(local_store, sample_data):
    storage = PortfolioStorage(local_store)
    assert not storage.has_saved_data("u1")

    await storage.save(sample_data, "u1")
    assert storage.has_saved_data("u1")
    assert storage.has_saved_data()

    storage.clear("u1")
    assert not storage.has_saved_data("u1")
    assert local_store.keys() == []


class SlowRecordStore(JsonRecordStore):
    """Record store that yields mid-save and tracks overlapping calls."""

    def __init__(self):
        super().__init__("unused.json", persist=False)
        self.active = 0
        self.max_active = 0

    async def save(self, data, owner_id, portfolio_id=None):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(0.01)
            return await super().save(data, owner_id, portfolio_id)
        finally:
            self.active -= 1


@pytest.mark.asyncio
async def test_concurrent_saves_do_not_interleave(local_store, sample_data):
    remote = SlowRecordStore()
    storage = PortfolioStorage(local_store, remote=remote)

    first, second = await asyncio.gather(
        storage.save(rename(sample_data, "One"), "u1"),
        storage.save(rename(sample_data, "Two"), "u1"),
    )

    assert remote.max_active == 1
    assert first.record_id == second.record_id
    assert len(await remote.list_by_owner("u1")) == 1


@pytest.mark.asyncio
async def test_record_store_failed_write_keeps_table(record_store, sample_data):
    """Test that a record is neither added nor removed when the file write fails."""
    with patch('folio.storage.remote.atomic_write', side_effect=OSError("disk full")):
        with pytest.raises(StorageError):
            await record_store.save(sample_data, "u1")
    assert await record_store.list_by_owner("u1") == []

    record = await record_store.save(sample_data, "u1")
    with patch('folio.storage.remote.atomic_write', side_effect=OSError("disk full")):
        with pytest.raises(StorageError):
            await record_store.save(rename(sample_data, "Lost"), "u1", record.id)
        with pytest.raises(StorageError):
            await record_store.delete(record.id, "u1")

    records = await record_store.list_by_owner("u1")
    assert [r.id for r in records] == [record.id]
    assert records[0].data == sample_data


@pytest.mark.asyncio
async def test_failed_remote_write_is_reported(local_store, record_store, sample_data):
    storage = PortfolioStorage(local_store, remote=record_store)
    with patch('folio.storage.remote.atomic_write', side_effect=OSError("disk full")):
        outcome = await storage.save(sample_data, "u1")

    assert not outcome.remote_saved
    assert outcome.local_saved
    assert "disk full" in outcome.warning
    assert await storage.list_by_owner("u1") == []


@pytest.mark.asyncio
async def test_missing_local_file_is_recreated(local_store, record_store, sample_data):
    """Test that a local store file removed after startup reads as empty."""
    storage = PortfolioStorage(local_store, remote=record_store)
    local_store.entries_file.unlink()

    assert not storage.has_saved_data("u1")
    assert await PortfolioStorage(local_store).load("u1") is None

    outcome = await storage.save(sample_data, "u1")
    assert outcome.remote_saved and outcome.local_saved
    assert local_store.entries_file.exists()
    assert local_store.load(owner_key("u1")) == sample_data

    local_store.entries_file.unlink()
    assert await storage.load("u1") == sample_data
    assert await PortfolioStorage(local_store).load("u1") is None
