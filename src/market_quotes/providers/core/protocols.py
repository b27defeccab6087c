"""Protocols for the resolvers' external collaborators."""
from typing import Protocol


class FetchText(Protocol):
    """Fetch collaborator: GET a fully-formed URL and return the body as text.

    Transport failures (DNS, TLS, non-2xx) are raised by the implementation;
    resolvers do not retry or cache.
    """

    async def __call__(self, url: str) -> str: ...
