import logging

from document import Snapshot


logger = logging.getLogger(__name__)


class UndoHistory:
    """LIFO stack of whole-document snapshots."""

    def __init__(self, max_depth: int | None = None):
        self.max_depth = max_depth
        self._stack: list[Snapshot] = []

    def __len__(self):
        return len(self._stack)

    def push(self, snap: Snapshot):
        self._stack.append(snap)
        if self.max_depth is not None and len(self._stack) > self.max_depth:
            # oldest snapshot falls off the bottom
            self._stack.pop(0)
            logger.debug("undo history capped at %d", self.max_depth)

    def pop(self) -> Snapshot | None:
        if not self._stack:
            return None
        return self._stack.pop()

    def clear(self):
        self._stack.clear()
