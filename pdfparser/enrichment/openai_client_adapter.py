import httpx
import openai

from pdfparser.enrichment.client_base import BaseCompletionClient
from pdfparser.enrichment.exceptions import (
    RemoteContentError,
    RemoteNetworkError,
    RemoteRateLimitError,
    RemoteServiceError,
)


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API.

    SDK-level retries are disabled; RemoteCallDispatcher owns retrying.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        extra: dict[str, object] = {}
        if json_response:
            extra["response_format"] = {"type": "json_object"}
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                **extra,  # type: ignore[arg-type]
            )
        except openai.RateLimitError as exc:
            raise RemoteRateLimitError(f"AI provider rate limit: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise RemoteNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise RemoteServiceError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise RemoteContentError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise RemoteContentError("AI returned empty response")
        return content
