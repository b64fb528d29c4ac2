class ExtractionError(Exception):
    """Base exception for text extraction strategies."""


class StrategyConfigurationError(ExtractionError):
    """Raised at startup when some document kind has no extraction strategy."""


class ProtectedDocumentError(ExtractionError):
    """Raised when text is requested from a document that needs a password."""
