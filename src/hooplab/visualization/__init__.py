"""Renderers for finished shots. The core never imports these."""

from .text_display import TextDisplay

__all__ = ["TextDisplay"]
