"""Pillow renderer for 1200x630 Open Graph cards."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from ogcache.render.layout import layout_card

logger = logging.getLogger(__name__)

CARD_WIDTH = 1200
CARD_HEIGHT = 630

_MARGIN = 48
_BRAND_SIZE = 28
_TITLE_SIZE = 48
_DESCRIPTION_SIZE = 26
_LINE_SPACING = 1.25

_BACKGROUND = (24, 24, 27)
_BRAND_COLOR = (161, 161, 170)
_TITLE_COLOR = (250, 250, 250)
_DESCRIPTION_COLOR = (212, 212, 216)
_ACCENT_COLOR = (220, 38, 38)


class Renderer(Protocol):
    """Synchronous renderer: (brand, title, description) -> image bytes."""

    def render(self, brand: str, title: str, description: str) -> bytes: ...


class CardRenderer:
    """Draws brand, wrapped title and wrapped description onto a PNG card."""

    def __init__(self, font_path: str | Path | None = None) -> None:
        self._font_path = Path(font_path) if font_path else None

    def render(self, brand: str, title: str, description: str) -> bytes:
        title_lines, description_lines = layout_card(title, description)
        logger.debug(
            "Rendering card: %d title lines, %d description lines",
            len(title_lines),
            len(description_lines),
        )

        img = Image.new("RGB", (CARD_WIDTH, CARD_HEIGHT), _BACKGROUND)
        draw = ImageDraw.Draw(img)
        draw.rectangle((0, 0, 12, CARD_HEIGHT), fill=_ACCENT_COLOR)

        y = _MARGIN
        y = self._draw_lines(draw, [brand], y, _BRAND_SIZE, _BRAND_COLOR)
        y += _MARGIN // 2
        y = self._draw_lines(draw, title_lines, y, _TITLE_SIZE, _TITLE_COLOR)
        y += _MARGIN // 2
        self._draw_lines(draw, description_lines, y, _DESCRIPTION_SIZE, _DESCRIPTION_COLOR)

        return _to_png_bytes(img)

    def _draw_lines(
        self,
        draw: ImageDraw.ImageDraw,
        lines: list[str],
        y: int,
        size: int,
        color: tuple[int, int, int],
    ) -> int:
        font = self._font(size)
        line_height = int(size * _LINE_SPACING)
        for line in lines:
            draw.text((_MARGIN, y), line, font=font, fill=color)
            y += line_height
        return y

    def _font(self, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        if self._font_path:
            return ImageFont.truetype(str(self._font_path), size)
        return ImageFont.load_default(size=size)


def _to_png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG", optimize=True)
    return buf.getvalue()
