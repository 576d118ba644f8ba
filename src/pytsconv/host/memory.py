"""In-memory collaborators for tests and embedding without a real clock."""

from __future__ import annotations

from pytsconv.host._base import Clipboard, WallClock


class FrozenClock(WallClock):
    """A clock that only moves when told to."""

    def __init__(self, millis: int) -> None:
        self.millis = millis

    def now_millis(self) -> int:
        return self.millis

    def advance(self, millis: int) -> None:
        self.millis += millis


class MemoryClipboard(Clipboard):
    """Records every accepted write; refuses all writes when ``fail`` is set."""

    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[str] = []

    @property
    def text(self) -> str | None:
        return self.writes[-1] if self.writes else None

    async def write_text(self, text: str) -> bool:
        if self.fail:
            return False
        self.writes.append(text)
        return True
