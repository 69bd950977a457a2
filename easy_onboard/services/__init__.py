"""External service integrations."""

from .sources import (
    DocumentSource,
    FetchError,
    FileDocumentSource,
    HttpDocumentSource,
)

__all__ = [
    "DocumentSource",
    "FetchError",
    "FileDocumentSource",
    "HttpDocumentSource",
]
