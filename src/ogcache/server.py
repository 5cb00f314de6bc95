"""FastAPI surface: GET /og-image?p=<identifier> returns a PNG card."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Response
from fastapi.responses import PlainTextResponse

from ogcache.errors.exceptions import OgCacheError
from ogcache.generator import OgImageGenerator

logger = logging.getLogger(__name__)


def create_app(generator: OgImageGenerator) -> FastAPI:
    """Build the HTTP app around an already-configured generator."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await generator.store.close()

    app = FastAPI(title="ogcache", lifespan=lifespan)

    @app.get("/og-image")
    async def og_image(p: str | None = Query(default=None)) -> Response:
        logger.info("Post path: %s", p)
        try:
            image_bytes = await generator.generate(p)
        except OgCacheError as e:
            logger.error("Error generating OG image (%s): %s", e.kind.value, e.message)
            return PlainTextResponse(
                f"Error generating OG image: {e.message}", status_code=e.http_status
            )
        except Exception as e:
            logger.exception("Unexpected error generating OG image")
            return PlainTextResponse(f"Error generating OG image: {e}", status_code=500)

        return Response(
            content=image_bytes,
            media_type="image/png",
            headers={"Cache-Control": generator.context.cache_control},
        )

    @app.get("/healthz")
    async def healthz() -> dict:
        return {
            "status": "ok",
            "metadata_records": len(generator.context.metadata),
            "cache": generator.store.stats().model_dump(),
        }

    return app
