"""HTTP connector for downloading navigation map documents.

Fetches a PDF or text export from a URL so it can be handed to the parsers.
No parsing happens here; the connector only enforces scheme, status and size.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import unquote, urlparse

import httpx

from navmap.exceptions import FetchError

logger = logging.getLogger(__name__)

_DISPOSITION_FILENAME = re.compile(r'filename\*?=(?:UTF-8\'\')?"?([^";]+)"?', re.IGNORECASE)


@dataclass
class FetchedDocument:
    url: str
    filename: str
    content_type: Optional[str]
    content: bytes


def _filename_for(url: str, disposition: Optional[str]) -> str:
    if disposition:
        match = _DISPOSITION_FILENAME.search(disposition)
        if match:
            return unquote(match.group(1).strip())
    path = urlparse(url).path
    return unquote(path.rstrip("/").rsplit("/", 1)[-1]) if path else ""


class DocumentConnector:
    def __init__(
        self,
        *,
        timeout: float = 20.0,
        user_agent: str = "navmap-document-fetcher/0.1",
        verify_ssl: bool = True,
        max_bytes: int = 20 * 1024 * 1024,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl
        self.max_bytes = max_bytes

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            verify=self.verify_ssl,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        )

    async def fetch(self, url: str) -> FetchedDocument:
        """Download a document.

        Raises `ValueError` for non-HTTP(S) URLs and `FetchError` when the
        request fails, returns a non-200 status, or exceeds `max_bytes`.
        """
        target = (url or "").strip()
        if urlparse(target).scheme not in ("http", "https"):
            raise ValueError(f"Only http(s) URLs are supported: {url!r}")

        try:
            async with self._client() as client:
                async with client.stream("GET", target) as resp:
                    if resp.status_code != 200:
                        raise FetchError(f"{target} returned HTTP {resp.status_code}")
                    declared = resp.headers.get("content-length", "")
                    if declared.isdigit() and int(declared) > self.max_bytes:
                        raise FetchError(f"{target} is larger than {self.max_bytes} bytes")
                    chunks: List[bytes] = []
                    size = 0
                    async for chunk in resp.aiter_bytes():
                        size += len(chunk)
                        if size > self.max_bytes:
                            raise FetchError(f"{target} is larger than {self.max_bytes} bytes")
                        chunks.append(chunk)
                    final_url = str(resp.url)
                    content_type = resp.headers.get("content-type")
                    disposition = resp.headers.get("content-disposition")
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {target}: {exc}") from exc

        logger.info("Fetched %d bytes from %s", size, final_url)
        return FetchedDocument(
            url=final_url,
            filename=_filename_for(final_url, disposition),
            content_type=content_type,
            content=b"".join(chunks),
        )
