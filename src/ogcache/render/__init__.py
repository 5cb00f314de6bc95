"""Card rendering — layout, Pillow renderer and async invoker."""

from ogcache.render.card import CardRenderer, Renderer
from ogcache.render.invoker import RenderInvoker
from ogcache.render.layout import layout_card, wrap_text

__all__ = [
    "CardRenderer",
    "RenderInvoker",
    "Renderer",
    "layout_card",
    "wrap_text",
]
