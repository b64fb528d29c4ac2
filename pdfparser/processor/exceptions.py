class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InvalidOptionsError(ProcessorError, ValueError):
    """Raised when caller-supplied extraction options are out of range."""


class FileTooLargeError(ProcessorError):
    """Raised when a document exceeds the configured maximum size."""


class UnsupportedFileError(ProcessorError):
    """Raised when a file is not a PDF."""


class DocumentFetchError(ProcessorError):
    """Raised when a document cannot be downloaded from a URL."""
