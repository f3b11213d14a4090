"""
Exception types raised at the import, export and storage boundaries.
"""
from typing import Dict, Optional


class FolioError(Exception):
    """Base class for all folio errors."""


class StorageError(FolioError):
    """Raised when a portfolio could not be persisted or removed anywhere."""


class PortfolioImportError(FolioError):
    """Raised when an imported file is not a usable portfolio document."""


class ImageEncodingError(FolioError):
    """Raised when an image cannot be turned into a persistent reference."""


class OperationInProgressError(FolioError):
    """Raised when a save or export is started while another one is running."""


class ExportError(FolioError):
    """Raised when an export path fails.

    Args:
        message: What went wrong
        suggestion: Alternate export route to offer the user
        errors: Validation error map when the export was blocked by invalid data
    """

    DEFAULT_SUGGESTION = "Try exporting as HTML or JSON instead."

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        errors: Optional[Dict[str, str]] = None
    ):
        super().__init__(message)
        self.suggestion = suggestion or self.DEFAULT_SUGGESTION
        self.errors = errors or {}
