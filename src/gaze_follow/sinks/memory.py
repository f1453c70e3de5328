from typing import Optional


class MemoryDisplay:
    """Keeps every path it was asked to show. Used headless and in tests."""

    def __init__(self):
        self.history: list[str] = []

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def show(self, path: str) -> None:
        self.history.append(path)


class MemoryOverlay:
    def __init__(self):
        self.text: str = ""

    def update(self, text: str) -> None:
        self.text = text


class MemoryNotifier:
    def __init__(self):
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
