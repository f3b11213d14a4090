"""
Local JSON storage implementation.
"""
from datetime import datetime
import json
import random
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..errors import StorageError
from ..portfolio.models import PortfolioData
from ..utils.files import atomic_write

SHARED_KEY = "portfolioData"


def owner_key(owner_id: str) -> str:
    """Per-owner key, next to the shared one."""
    return f"{SHARED_KEY}_{owner_id}"


class JsonLocalStore:
    """Key-value store of portfolio snapshots in a local JSON file."""

    def __init__(self, storage_dir: str = "data/local"):
        """Initialize local store."""
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        # Single file mapping key -> portfolio in wire format
        self.entries_file = self.storage_dir / "portfolios.json"
        self.entries_file.touch(exist_ok=True)

    def _read_entries(self) -> Dict[str, dict]:
        """Read every stored entry."""
        try:
            # Missing file reads as empty; the next write recreates it
            if not self.entries_file.exists() or self.entries_file.stat().st_size == 0:
                return {}
            with open(self.entries_file, 'r', encoding='utf-8') as f:
                entries = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Local store {self.entries_file} is unreadable: {e}") from e
        if not isinstance(entries, dict):
            raise StorageError(f"Local store {self.entries_file} is not a JSON object")
        return entries

    def _write_entries(self, entries: Dict[str, dict]):
        """Write every entry back to file."""
        try:
            atomic_write(self.entries_file, json.dumps(entries, indent=2, ensure_ascii=False))
        except OSError as e:
            raise StorageError(f"Could not write local store {self.entries_file}: {e}") from e

    def save(self, key: str, data: PortfolioData):
        """Store a snapshot under ``key``, replacing what was there."""
        entries = self._read_entries()
        entries[key] = data.to_wire()
        self._write_entries(entries)

    def load(self, key: str) -> Optional[PortfolioData]:
        """Get the snapshot stored under ``key``.

        Returns:
            PortfolioData if found, None otherwise

        Raises:
            StorageError: If the entry exists but is not a valid portfolio
        """
        entry = self._read_entries().get(key)
        if entry is None:
            return None
        try:
            return PortfolioData.model_validate(entry)
        except ValidationError as e:
            raise StorageError(f"Corrupt local entry {key!r}: {e}") from e

    def remove(self, key: str):
        entries = self._read_entries()
        if entries.pop(key, None) is not None:
            self._write_entries(entries)

    def has(self, key: str) -> bool:
        return key in self._read_entries()

    def keys(self) -> List[str]:
        return list(self._read_entries())

    def backup(self, backup_dir: str = "data/backups", max_backups: int = 5) -> Path:
        """Create a backup of the local store.

        Args:
            backup_dir: Directory to store backups
            max_backups: Maximum number of backups to keep
        """
        backup_path = Path(backup_dir)
        backup_path.mkdir(parents=True, exist_ok=True)

        # Timestamped directory with random suffix
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        random_suffix = ''.join(random.choices('0123456789abcdef', k=4))
        target = backup_path / f"backup_{timestamp}_{random_suffix}"
        target.mkdir()

        shutil.copy2(self.entries_file, target / "portfolios.json")

        entries = self._read_entries()
        backup_info = {
            "timestamp": timestamp,
            "random_suffix": random_suffix,
            "num_entries": len(entries),
            "keys": sorted(entries),
        }
        with open(target / "backup_info.json", 'w', encoding='utf-8') as f:
            json.dump(backup_info, f, indent=2)

        self._cleanup_old_backups(backup_path, max_backups)

        return target

    def _cleanup_old_backups(self, backup_dir: Path, max_backups: int):
        """Remove the oldest backups beyond ``max_backups``."""
        backup_dirs = sorted(
            [d for d in backup_dir.iterdir() if d.is_dir() and d.name.startswith("backup_")],
            key=lambda x: x.name.split("_")[1:3]  # date, time
        )

        while len(backup_dirs) > max_backups:
            shutil.rmtree(backup_dirs.pop(0))

    def restore_from_backup(self, backup_dir: str):
        """Restore the local store from a backup.

        Args:
            backup_dir: Path to backup directory to restore from
        """
        backup_path = Path(backup_dir)
        if not backup_path.exists():
            raise ValueError(f"Backup directory not found: {backup_dir}")

        shutil.copy2(backup_path / "portfolios.json", self.entries_file)
