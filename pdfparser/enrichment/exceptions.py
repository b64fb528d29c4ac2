class RemoteServiceError(Exception):
    """Raised when a call to the completion service fails. Retryable."""


class RemoteRateLimitError(RemoteServiceError):
    """Raised when the completion service signals throttling (HTTP 429)."""


class RemoteNetworkError(RemoteServiceError):
    """Raised when the completion service cannot be reached or times out."""


class RemoteContentError(RemoteServiceError):
    """Raised when the completion service returns empty or malformed content."""
