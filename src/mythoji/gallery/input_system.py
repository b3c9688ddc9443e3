"""Keyboard handling for the glyph gallery."""
from mythoji.events.bus import (
    EVENT_GALLERY_FAMILY_REQUEST,
    EVENT_GALLERY_GENDER_REQUEST,
    EVENT_GALLERY_PAGE_REQUEST,
    EVENT_GALLERY_SELECT_REQUEST,
    EVENT_GALLERY_SKIN_TONE_REQUEST,
    EVENT_KEY_PRESS,
    EventBus,
)

# arcade.key values, kept local to avoid importing arcade outside the window.
KEY_TAB = 65289
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_G = 103
KEY_T = 116
MOD_SHIFT = 1

_KEY_REQUESTS = {
    KEY_TAB: (EVENT_GALLERY_FAMILY_REQUEST, 1),
    KEY_UP: (EVENT_GALLERY_PAGE_REQUEST, -1),
    KEY_DOWN: (EVENT_GALLERY_PAGE_REQUEST, 1),
    KEY_LEFT: (EVENT_GALLERY_SELECT_REQUEST, -1),
    KEY_RIGHT: (EVENT_GALLERY_SELECT_REQUEST, 1),
    KEY_T: (EVENT_GALLERY_SKIN_TONE_REQUEST, 1),
    KEY_G: (EVENT_GALLERY_GENDER_REQUEST, 1),
}


class GalleryInputSystem:
    """Translates raw key presses into gallery request events."""

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        try:
            modifiers = int(payload.get("modifiers") or 0)
        except (TypeError, ValueError):
            modifiers = 0
        self.handle_key_press(int(symbol), modifiers)

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> bool:
        """Emit the request bound to ``symbol``; shift reverses the direction."""
        request = _KEY_REQUESTS.get(symbol)
        if request is None:
            return False
        name, step = request
        if modifiers & MOD_SHIFT:
            step = -step
        self.event_bus.emit(name, step=step)
        return True
