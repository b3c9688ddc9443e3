from __future__ import annotations

from typing import Iterable

from mythoji.events.bus import EVENT_KEY_PRESS, EventBus


def press_keys(bus: EventBus, symbols: Iterable[int], modifiers: int = 0) -> None:
    """Emit one raw key press per symbol, as the window would."""

    for symbol in symbols:
        bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)
