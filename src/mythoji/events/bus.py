from blinker import Signal
from typing import Dict


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"      # payload: symbol=int, modifiers=int


# ============================================================================
# GALLERY REQUESTS
# ============================================================================
EVENT_GALLERY_FAMILY_REQUEST = "gallery_family_request"        # payload: step=int
EVENT_GALLERY_PAGE_REQUEST = "gallery_page_request"            # payload: step=int
EVENT_GALLERY_SELECT_REQUEST = "gallery_select_request"        # payload: step=int
EVENT_GALLERY_SKIN_TONE_REQUEST = "gallery_skin_tone_request"  # payload: step=int
EVENT_GALLERY_GENDER_REQUEST = "gallery_gender_request"        # payload: step=int


# ============================================================================
# GALLERY NOTIFICATIONS
# ============================================================================
EVENT_GALLERY_CHANGED = "gallery_changed"                        # payload: reason=str, family=Family, page=int
EVENT_GALLERY_SELECTION_CHANGED = "gallery_selection_changed"    # payload: category=Category, glyph=str
