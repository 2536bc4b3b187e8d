"""Media generation - story illustrations."""

from kidstory_ai.media.image_generator import ImageGenerator, illustration_preview

__all__ = ["ImageGenerator", "illustration_preview"]
