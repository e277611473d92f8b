"""OpenAI-compatible embedding provider — calls the /embeddings endpoint.

Works against api.openai.com as well as any gateway exposing the same
request/response shape (OpenRouter, Azure-style proxies, local servers).
Default model: text-embedding-ada-002 (1536 dimensions).
"""

import logging
from typing import Any

import httpx

from docs_assistant.application.interfaces.embedding_provider import EmbeddingProvider
from docs_assistant.domain.exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """Infrastructure adapter — generates embeddings via an OpenAI-style /embeddings API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model: str = "text-embedding-ada-002",
        model_dimensions: int = 1536,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._dimensions = model_dimensions
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    @property
    def _supports_dimensions(self) -> bool:
        """Only the text-embedding-3 family accepts a ``dimensions`` parameter."""
        return "text-embedding-3" in self._model

    async def generate_embeddings(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for a batch of texts, preserving input order."""
        if not texts:
            return []

        url = f"{self._base_url}/embeddings"
        payload: dict[str, Any] = {
            "model": self._model,
            "input": texts,
        }
        if self._supports_dimensions:
            payload["dimensions"] = self._dimensions

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(
                    url, headers=self._get_headers(), json=payload
                )
            except httpx.HTTPError as exc:
                logger.error("Embedding request failed: %s", exc)
                raise EmbeddingProviderError(self.provider_name, 0, str(exc)) from exc

            if response.status_code != 200:
                error_text = response.text[:500]
                logger.error(
                    "Embedding API error %d: %s", response.status_code, error_text
                )
                raise EmbeddingProviderError(self.provider_name, response.status_code, error_text)

            data = response.json()
            embeddings_data = data.get("data", [])

            # Sort by index to ensure correct ordering
            embeddings_data.sort(key=lambda x: x.get("index", 0))
            result = [item["embedding"] for item in embeddings_data]

            if len(result) != len(texts):
                raise EmbeddingProviderError(
                    self.provider_name,
                    response.status_code,
                    f"expected {len(texts)} embeddings, got {len(result)}",
                )

            logger.info(
                "Generated %d embeddings (model=%s, dims=%d)",
                len(result),
                self._model,
                len(result[0]) if result else 0,
            )
            return result

        finally:
            if should_close:
                await client.aclose()
