"""Exception hierarchy.

KidStoryError
  ProviderError - non-2xx response, timeout or transport failure from an
                  external text or image provider
"""


class KidStoryError(Exception):
    """Base error for the story pipeline."""


class ProviderError(KidStoryError):
    """An external generation provider call failed.

    Attributes:
        provider: short provider name, e.g. "openai", "grok", "image"
        status_code: HTTP status when a response was received
        body: response body text, truncated
    """

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        self.provider = provider
        self.message = message
        self.status_code = status_code
        self.body = body[:500]
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.provider}: {self.message} (HTTP {self.status_code})"
        return f"{self.provider}: {self.message}"
