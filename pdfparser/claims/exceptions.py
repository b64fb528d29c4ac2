class ClaimsExtractionError(Exception):
    """Base exception for claims extraction errors."""


class ConfigStoreError(ClaimsExtractionError):
    """Raised when extraction configurations cannot be loaded."""
