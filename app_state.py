from clipboard import Clipboard
from document import Document
from undo_history import UndoHistory


class AppState:
    def __init__(
        self,
        document: Document,
        file_path: str | None,
        file_handler,
        undo_max_depth: int | None = None,
        clipboard_command: list[str] | None = None,
    ):
        self.file_path = file_path
        self.file_handler = file_handler

        self.document = document
        self.history = UndoHistory(max_depth=undo_max_depth)
        self.clipboard = Clipboard(interface_command=clipboard_command)

    @classmethod
    def from_config(cls, document, file_path, file_handler, config):
        return cls(
            document,
            file_path,
            file_handler,
            undo_max_depth=config.get("UNDO_MAX_DEPTH"),
            clipboard_command=config.get("CLIPBOARD_INTERFACE_COMMAND"),
        )

    def push_undo(self):
        self.history.push(self.document.snapshot())

    def undo(self) -> bool:
        snap = self.history.pop()
        if snap is None:
            return False
        self.document.restore(snap)
        return True

    def save(self):
        if self.file_handler is None:
            raise ValueError("No file handler to save with")
        self.file_handler.save(self.document)
