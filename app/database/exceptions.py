class PersistenceError(Exception):
    """Raised when a document store operation fails."""


class PersistenceConfigError(PersistenceError):
    """Raised when the document store is not configured."""


class ReportNotFoundError(PersistenceError):
    """Raised when a report id cannot address a stored record."""
