from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ListCursor:
    """Wraparound cursor over a list whose length can change between ticks.

    ``index`` is None when nothing is selected. The stored index is never
    trusted blindly: ``clamped()`` bounds it to the current length.
    """

    def __init__(self) -> None:
        self.index: int | None = None
        self._length = 0

    @property
    def length(self) -> int:
        return self._length

    def resize(self, length: int) -> None:
        """Track a new list length after a refresh."""
        self._length = length
        if length == 0:
            self.index = None
        elif self.index is None:
            self.index = 0

    def clamped(self) -> int | None:
        """Return the selection bounded to the current list, or None."""
        if self.index is None or self._length == 0:
            return None
        return min(self.index, self._length - 1)

    def move_down(self) -> None:
        if self._length == 0:
            return
        current = self.clamped()
        if current is None or current >= self._length - 1:
            self.index = 0
        else:
            self.index = current + 1
        logger.debug(f"Moved cursor to index {self.index}")

    def move_up(self) -> None:
        if self._length == 0:
            return
        current = self.clamped()
        if current is None or current == 0:
            self.index = self._length - 1
        else:
            self.index = current - 1
        logger.debug(f"Moved cursor to index {self.index}")

    def jump_top(self) -> None:
        if self.index is not None and self._length > 0:
            self.index = 0

    def jump_bottom(self) -> None:
        if self.index is not None and self._length > 0:
            self.index = self._length - 1
