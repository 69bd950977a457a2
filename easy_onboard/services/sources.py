"""Document sources - where the onboarding YAML text comes from.

Uses httpx for async HTTP requests and tenacity for retrying transient
failures. Sources are handed to the pipeline explicitly; there is no
process-wide client.
"""

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from pathlib import Path
from typing import Optional, Protocol, Union
import logging

from ..models import SourceConfig

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the onboarding document cannot be retrieved.

    Distinct from ParseError: the text never arrived, so nothing about its
    content is known.
    """

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DocumentSource(Protocol):
    """Anything that can hand back the raw onboarding YAML."""

    async def fetch_text(self) -> str:
        """Return the document text, raising FetchError on failure."""
        ...

    def describe(self) -> str:
        ...


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return False


class HttpDocumentSource:
    """Fetches the onboarding YAML over HTTP(S).

    Usage:
        async with HttpDocumentSource(config.source) as source:
            raw = await source.fetch_text()
    """

    def __init__(
        self,
        config: SourceConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "HttpDocumentSource":
        self._client = httpx.AsyncClient(
            headers={"Accept": "application/yaml, text/plain, */*"},
            timeout=self.config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            await self._client.aclose()
            self._client = None

    def describe(self) -> str:
        return self.config.url

    async def _get(self) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_attempts),
            wait=wait_exponential(
                multiplier=self.config.backoff_multiplier,
                max=self.config.backoff_max,
            ),
            retry=retry_if_exception(_is_transient),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(
                        f"Retrying {self.config.url} "
                        f"(attempt {attempt.retry_state.attempt_number}/{self.config.max_attempts})"
                    )
                response = await self._client.get(self.config.url)
                response.raise_for_status()
        return response

    async def fetch_text(self) -> str:
        """Fetch the raw document text.

        Raises:
            FetchError: On network failure or a non-2xx response, after
                transient failures have been retried.
        """
        if not self._client:
            raise FetchError(
                "Source not initialized. Use async context manager.",
                url=self.config.url,
            )

        try:
            response = await self._get()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise FetchError(
                f"HTTP error! status: {status}",
                url=self.config.url,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(
                f"Could not reach {self.config.url}: {e}",
                url=self.config.url,
            ) from e

        logger.debug(f"Fetched {len(response.content)} bytes from {self.config.url}")
        return response.text


class FileDocumentSource:
    """Reads the onboarding YAML from a local file.

    Useful for:
    - Previewing a guide before publishing it
    - Testing without network access
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def __aenter__(self) -> "FileDocumentSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    def describe(self) -> str:
        return str(self.path)

    async def fetch_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(f"Could not read {self.path}: {e}", url=str(self.path)) from e
