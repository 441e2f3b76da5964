"""Renderer package."""

from .base import Backend
from .html_renderer import DEFAULT_CSS_CLASS, HTMLRenderer

__all__ = ["Backend", "DEFAULT_CSS_CLASS", "HTMLRenderer"]
