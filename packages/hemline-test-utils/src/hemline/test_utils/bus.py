from contextlib import contextmanager
from typing import Any, Dict, List, Optional

# Import the actual singleton to patch it in-place
import hemline.common
from hemline.common.messaging.protocols import Renderer


class SpyRenderer(Renderer):
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        self.messages.append({"level": level, "message": message})


class SpyBus:
    """
    A Test Utility that spies on the global hemline.common.bus singleton.

    Modules import the instance via 'from hemline.common import bus', so the
    renderer of that instance is swapped rather than the instance itself.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        real_bus = hemline.common.bus
        # monkeypatch restores the previous renderer on teardown.
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)
        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def lines(self, level: Optional[str] = None) -> List[str]:
        return [
            m["message"]
            for m in self.get_messages()
            if level is None or m["level"] == level
        ]

    def assert_message(self, text: str, level: Optional[str] = None):
        if text in self.lines(level):
            return
        seen = [f"[{m['level']}] {m['message']}" for m in self.get_messages()]
        raise AssertionError(
            f"Message '{text}' was not sent at level {level!r}.\nCaptured: {seen}"
        )
