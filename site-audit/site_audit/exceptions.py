"""Exceptions raised by the site audit checks."""

from pathlib import Path


class SiteAuditError(Exception):
    """Base exception for site audit failures"""


class DirectoryNotFound(SiteAuditError):
    """
    The build output directory does not exist.

    Raised before any scanning happens, so no partial report is produced.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Build directory not found: {path}")
