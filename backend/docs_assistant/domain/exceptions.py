"""Domain-specific exceptions — framework-independent."""


class EmbeddingProviderError(Exception):
    """Raised when the embedding provider fails or returns a malformed response.

    Provider-agnostic — works for OpenAI, OpenRouter, local gateways, etc.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class DocumentFetchError(Exception):
    """Raised when a documentation page cannot be downloaded."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(f"Failed to fetch '{url}': {message}")


class ChangelogUnavailableError(Exception):
    """Raised when a changelog can neither be fetched nor served from cache."""

    def __init__(self, sdk: str):
        self.sdk = sdk
        super().__init__(f"Unable to fetch changelog for {sdk}")
