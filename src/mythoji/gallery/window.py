"""Arcade window that previews mythoji glyphs.

Sets up the ECS world, event bus and gallery systems.
"""
from arcade import Window, run

from mythoji.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from mythoji.events.bus import EVENT_KEY_PRESS, EventBus
from mythoji.gallery.gallery_system import GallerySystem
from mythoji.gallery.input_system import GalleryInputSystem
from mythoji.gallery.render_system import GalleryRenderSystem
from mythoji.world import create_world


class GalleryWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.world = create_world()
        self.gallery_system = GallerySystem(self.world, self.event_bus)
        self.input_system = GalleryInputSystem(self.event_bus)
        self.render_system = GalleryRenderSystem(self.world, self)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    GalleryWindow()
    run()
