"""
Keyboard input adapter.

Translates raw key events into direction commands for one game session.
Each session builds its own adapter, so there is no process-wide listener
state; the engine only ever sees the directions pushed into its queue.
"""

from typing import Callable, Dict, List, Optional, Set

from ..domain.constants import Direction, UP, DOWN, LEFT, RIGHT

# Browser-style key codes
SPACE = 32
ENTER = 13
SHIFT = 16
LEFT_ARROW = 37
UP_ARROW = 38
RIGHT_ARROW = 39
DOWN_ARROW = 40
R = 82

DEFAULT_BINDINGS: Dict[int, Direction] = {
    UP_ARROW: UP,
    DOWN_ARROW: DOWN,
    LEFT_ARROW: LEFT,
    RIGHT_ARROW: RIGHT,
}

DirectionHandler = Callable[[Direction], None]
KeyHandler = Callable[[], None]


class InputAdapter:
    """
    Per-session key state and listeners.

    key_down() ignores auto-repeat while a key is held, fires any handlers
    registered for that key, and reports bound direction keys to every
    direction handler.
    """

    def __init__(self, bindings: Optional[Dict[int, Direction]] = None):
        self.bindings = dict(DEFAULT_BINDINGS if bindings is None else bindings)
        self._down: Set[int] = set()
        self._key_handlers: Dict[int, List[KeyHandler]] = {}
        self._direction_handlers: List[DirectionHandler] = []

    def on_direction(self, handler: DirectionHandler) -> None:
        self._direction_handlers.append(handler)

    def on_key(self, key: int, handler: KeyHandler) -> None:
        self._key_handlers.setdefault(key, []).append(handler)

    def is_active(self, key: int) -> bool:
        return key in self._down

    def key_down(self, key: int) -> None:
        if key in self._down:
            return
        self._down.add(key)

        for handler in self._key_handlers.get(key, []):
            handler()

        direction = self.bindings.get(key)
        if direction is not None:
            for handler in self._direction_handlers:
                handler(direction)

    def key_up(self, key: int) -> None:
        self._down.discard(key)

    def release_all(self) -> None:
        """Forget held keys, e.g. when the window loses focus."""
        self._down.clear()
