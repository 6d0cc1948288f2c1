"""Fetching a URL's contents in one blocking call or in the background."""

from __future__ import annotations

import threading
import urllib.error
import urllib.request
from concurrent.futures import Future

_CHUNK_SIZE = 0x1000


def get_data(url: str) -> bytes | None:
    """Return the body found at ``url``, or None when it cannot be fetched."""
    try:
        with urllib.request.urlopen(url) as response:
            chunks: list[bytes] = []
            while chunk := response.read(_CHUNK_SIZE):
                chunks.append(chunk)
    except (urllib.error.URLError, OSError, ValueError):
        return None
    return b"".join(chunks)


def get_data_async(url: str) -> Future[bytes | None]:
    """Fetch ``url`` on its own thread; the future resolves to what ``get_data`` gives."""
    future: Future[bytes | None] = Future()

    def run() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(get_data(url))
        except BaseException as exc:  # handed to whoever waits on the future
            future.set_exception(exc)

    threading.Thread(target=run, name="get_data_async", daemon=True).start()
    return future