"""Renderers — protocol + HTML."""
from .base import Renderer
from .html import HTMLRenderer, BLOCK_TEMPLATE, render_version_detected_content, render_preview

__all__ = [
    "Renderer",
    "HTMLRenderer",
    "BLOCK_TEMPLATE",
    "render_version_detected_content",
    "render_preview",
]
