"""Interactive glyph gallery built on an esper world and the event bus."""

from .components import GalleryCell, GalleryState, GalleryTag
from .gallery_system import GallerySystem
from .input_system import GalleryInputSystem
