from pathlib import Path

import httpx

from pdfparser.logging.logger import Log
from pdfparser.processor.exceptions import (
    DocumentFetchError,
    FileTooLargeError,
    UnsupportedFileError,
)

PDF_SUFFIX = ".pdf"


def ensure_size(size: int, max_file_size: int, source: str) -> None:
    if size > max_file_size:
        raise FileTooLargeError(
            f"{source} is {size} bytes, limit is {max_file_size} bytes"
        )


class FileLoader:
    """Reads a PDF from the local filesystem after validating name and size."""

    def __init__(self, max_file_size: int) -> None:
        self._max_file_size = max_file_size

    def load(self, path: Path) -> bytes:
        """Read document bytes from disk.

        Raises:
            UnsupportedFileError: if the file name does not end in .pdf.
            FileNotFoundError: if the file does not exist.
            FileTooLargeError: if the file exceeds the configured size.
        """
        if path.suffix.lower() != PDF_SUFFIX:
            raise UnsupportedFileError(f"Only PDF files are supported: {path.name}")
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        ensure_size(path.stat().st_size, self._max_file_size, path.name)
        return path.read_bytes()


class DocumentFetcher:
    """Downloads a PDF over HTTP(S)."""

    def __init__(
        self,
        max_file_size: int,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._max_file_size = max_file_size
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        Log.info(f"Downloading document from {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    declared = response.headers.get("content-length")
                    if declared is not None and declared.isdigit():
                        ensure_size(int(declared), self._max_file_size, url)
                    content = bytearray()
                    async for chunk in response.aiter_bytes():
                        content.extend(chunk)
                        ensure_size(len(content), self._max_file_size, url)
        except httpx.HTTPStatusError as exc:
            raise DocumentFetchError(
                f"Download failed with status {exc.response.status_code}: {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DocumentFetchError(f"Download failed: {url}: {exc}") from exc
        Log.info(f"Downloaded {len(content)} bytes from {url}")
        return bytes(content)
