class CatalogError(Exception):
    """Base class for errors reported to catalog clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(CatalogError):
    pass


class NotFound(CatalogError):
    pass


class BadRequest(CatalogError):
    pass


class ArchiveError(CatalogError):
    """Raised when a download archive cannot be created or written."""
