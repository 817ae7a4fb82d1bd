from .text_renderer import TextRenderer

__all__ = ["TextRenderer"]
