"""Runs the synchronous renderer off the event loop."""

from __future__ import annotations

import asyncio
import logging

from ogcache.errors.exceptions import RenderError
from ogcache.render.card import Renderer
from ogcache.types import RenderRequest

logger = logging.getLogger(__name__)


class RenderInvoker:
    """Calls a Renderer in a worker thread and normalizes its failures.

    Any exception, a timeout, or an empty result becomes RenderError.
    """

    def __init__(self, renderer: Renderer, timeout: float | None = None) -> None:
        self._renderer = renderer
        self._timeout = timeout

    async def render(self, request: RenderRequest) -> bytes:
        deadline = asyncio.timeout(self._timeout)
        try:
            async with deadline:
                data = await asyncio.to_thread(
                    self._renderer.render, request.brand, request.title, request.description
                )
        except TimeoutError as e:
            if not deadline.expired():
                raise RenderError(str(e) or type(e).__name__, original=e) from e
            raise RenderError(
                f"Renderer timed out after {self._timeout:.1f}s", timed_out=True, original=e
            ) from e
        except Exception as e:
            raise RenderError(str(e) or type(e).__name__, original=e) from e

        if not data:
            raise RenderError("Renderer returned no image data")
        return bytes(data)
