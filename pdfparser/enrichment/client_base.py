from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific text completion clients."""

    @abstractmethod
    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
        json_response: bool = False,
    ) -> str:
        """Return the provider's completion as plain text.

        Raises:
            RemoteRateLimitError: when the provider throttles the request.
            RemoteNetworkError: on connection failures and timeouts.
            RemoteContentError: when the provider returns no content.
            RemoteServiceError: on any other provider error.
        """
