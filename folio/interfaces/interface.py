"""
Main interface for Folio users.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..errors import ExportError, OperationInProgressError, StorageError
from ..export import exporter
from ..portfolio.editor import PortfolioEditor
from ..portfolio.images import DEFAULT_MAX_IMAGE_BYTES, encode_image_file
from ..portfolio.models import PortfolioData, Project
from ..portfolio.validation import ValidationResult
from ..render.renderer import RenderedTree, render
from ..storage.adapter import PortfolioStorage
from ..storage.json_store import JsonLocalStore
from ..storage.models import PortfolioRecord, SaveOutcome
from ..storage.remote import JsonRecordStore, RemoteStore
from ..utils.config import Config
from ..utils.logger import setup_logger

logger = logging.getLogger(__name__)

INVALID_EXPORT_MESSAGE = "The portfolio has validation errors and cannot be exported yet"
INVALID_EXPORT_SUGGESTION = "Fix the fields listed in the error map, then export again."


class Folio:
    """One portfolio editing session: edit, preview, save and export."""

    def __init__(
        self,
        storage_path: Optional[str] = None,
        remote: Optional[RemoteStore] = None,
        current_user: Optional[Callable[[], Optional[str]]] = None,
        data: Optional[PortfolioData] = None,
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
        backup_dir: str = "data/backups",
        max_backups: int = 5
    ):
        """Initialize a session.

        Args:
            storage_path: Directory for the local store. If None, uses the
                package's data/local directory
            remote: Remote record store, created by the caller. None means
                local-only mode
            current_user: Returns the signed-in user id, or None when anonymous
            data: Starting snapshot; an empty portfolio when None
            max_image_bytes: Size cap for uploaded images
            backup_dir: Where ``backup`` writes local store backups
            max_backups: Number of backups kept
        """
        if storage_path is None:
            storage_path = str(Path(__file__).parent.parent.parent / "data" / "local")

        self._storage = PortfolioStorage(JsonLocalStore(storage_path), remote=remote)
        self._editor = PortfolioEditor(data)
        self._current_user = current_user
        self.max_image_bytes = max_image_bytes
        self.backup_dir = backup_dir
        self.max_backups = max_backups
        self._busy: Optional[str] = None

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        current_user: Optional[Callable[[], Optional[str]]] = None
    ) -> "Folio":
        """Build a session from configuration (``.env`` / environment)."""
        config = config or Config()
        setup_logger("folio", log_file=config.log_file, level=config.log_level)

        remote = None
        if config.remote_path:
            remote = JsonRecordStore(config.remote_path, persist=config.remote_persist)

        return cls(
            storage_path=config.storage_dir,
            remote=remote,
            current_user=current_user,
            data=PortfolioData.empty(config.default_template, config.default_color_scheme),
            max_image_bytes=config.max_image_bytes,
            backup_dir=config.backup_dir,
            max_backups=config.max_backups,
        )

    # Session state

    @property
    def data(self) -> PortfolioData:
        return self._editor.data

    @property
    def validation(self) -> ValidationResult:
        return self._editor.validation

    @property
    def owner_id(self) -> Optional[str]:
        return self._current_user() if self._current_user else None

    @contextmanager
    def _exclusive(self, action: str):
        """Reject a save or export while another one is running."""
        if self._busy:
            raise OperationInProgressError(f"Cannot {action} while {self._busy} is in progress")
        self._busy = action
        try:
            yield
        finally:
            self._busy = None

    def _require_valid(self):
        result = self.validation
        if not result.success:
            raise ExportError(
                INVALID_EXPORT_MESSAGE,
                suggestion=INVALID_EXPORT_SUGGESTION,
                errors=dict(result.errors),
            )

    # Editing

    def update_personal_info(self, **fields) -> PortfolioData:
        return self._editor.update_personal_info(**fields)

    def update_theme(self, **fields) -> PortfolioData:
        return self._editor.update_theme(**fields)

    def set_skills(self, skills: Iterable[str]) -> PortfolioData:
        return self._editor.set_skills(skills)

    def add_skill(self, skill: str) -> bool:
        return self._editor.add_skill(skill)

    def remove_skill(self, skill: str) -> PortfolioData:
        return self._editor.remove_skill(skill)

    def add_project(self, **fields) -> Project:
        return self._editor.add_project(**fields)

    def update_project(self, project_id: str, **fields) -> PortfolioData:
        return self._editor.update_project(project_id, **fields)

    def remove_project(self, project_id: str) -> PortfolioData:
        return self._editor.remove_project(project_id)

    def set_profile_photo(self, path: Union[str, Path]) -> PortfolioData:
        """Embed an image file as the profile photo."""
        photo = encode_image_file(path, max_bytes=self.max_image_bytes)
        return self._editor.update_personal_info(profile_photo=photo)

    def set_project_image(self, project_id: str, path: Union[str, Path]) -> PortfolioData:
        """Embed an image file as a project's image."""
        image = encode_image_file(path, max_bytes=self.max_image_bytes)
        return self._editor.update_project(project_id, image=image)

    # Preview

    def preview(self) -> RenderedTree:
        """Render the current snapshot. Works whether or not it validates."""
        return render(self.data)

    def preview_html(self) -> str:
        return exporter.to_standalone_document(self.data)

    # Storage

    async def save(self) -> SaveOutcome:
        """Save the current snapshot.

        Returns:
            SaveOutcome; ``warning`` is set when only the local copy was written
        """
        with self._exclusive("save"):
            outcome = await self._storage.save(self.data, self.owner_id)
            if outcome.warning:
                logger.warning(outcome.warning)
            return outcome

    async def load(self) -> Optional[PortfolioData]:
        """Load the saved snapshot into the session, if there is one."""
        data = await self._storage.load(self.owner_id)
        if data is not None:
            self._editor.replace(data)
        return data

    async def list_portfolios(self) -> List[PortfolioRecord]:
        owner_id = self.owner_id
        if not owner_id:
            return []
        return await self._storage.list_by_owner(owner_id)

    async def delete_portfolio(self, portfolio_id: str):
        owner_id = self.owner_id
        if not owner_id:
            raise StorageError("Sign in to delete saved portfolios")
        await self._storage.delete(portfolio_id, owner_id)

    def clear_saved(self):
        self._storage.clear(self.owner_id)

    def has_saved_data(self) -> bool:
        return self._storage.has_saved_data(self.owner_id)

    def backup(self) -> Path:
        """Back up the local store."""
        return self._storage.local.backup(self.backup_dir, self.max_backups)

    # Export / import

    def export_html(self, out_dir: Union[str, Path]) -> Path:
        with self._exclusive("export"):
            self._require_valid()
            return exporter.write_html(self.data, out_dir)

    def export_json(self, out_dir: Union[str, Path]) -> Path:
        with self._exclusive("export"):
            self._require_valid()
            return exporter.write_json(self.data, out_dir)

    async def export_pdf(self, out_dir: Union[str, Path]) -> Path:
        with self._exclusive("export"):
            self._require_valid()
            path = Path(out_dir) / exporter.export_filename(self.data, "pdf")
            return await exporter.print_to_pdf(self.data, path)

    def export_gallery(self, out_dir: Union[str, Path]) -> List[Path]:
        with self._exclusive("export"):
            self._require_valid()
            return exporter.export_gallery(self.data, out_dir)

    def import_file(self, path: Union[str, Path]) -> PortfolioData:
        """Replace the session's data with a JSON export.

        The session is left unchanged when the file is rejected.
        """
        data = exporter.import_json(Path(path))
        self._editor.replace(data)
        logger.info(f"Imported portfolio from {path}")
        return data
