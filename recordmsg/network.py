"""HTTP helpers used by the messenger adaptors."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable, Tuple, Union

import httpx

from recordmsg.messenger import MessengerError

logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_UNAUTHORIZED = 401


class HttpStatusError(MessengerError):
    """A request came back with a status other than 200 OK."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


async def http_request(
    client: httpx.AsyncClient,
    url: str,
    headers: Iterable[Tuple[str, str]],
) -> Any:
    """GET ``url`` with ``headers`` and return the decoded JSON body."""
    response = await client.get(url, headers=list(headers))
    if response.status_code != HTTP_OK:
        raise HttpStatusError(
            HTTP_UNAUTHORIZED, "request was refused, probably an outdated token"
        )
    return response.json()


async def cache_download(
    client: httpx.AsyncClient,
    url: str,
    path: Union[str, os.PathLike],
    file_name: str,
) -> Path:
    """Download ``url`` into ``path/file_name`` unless it is already there."""
    directory = Path(path)
    file_path = directory / file_name
    if file_path.exists():
        return file_path

    response = await client.get(url)
    if response.status_code != HTTP_OK:
        raise HttpStatusError(
            response.status_code,
            f"Failed to download file. Status: {response.status_code}",
        )

    try:
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Directory ready: %s", directory)
    except OSError as exc:
        logger.error("Failed to create directory: %s", exc)

    file_path.write_bytes(response.content)
    return file_path