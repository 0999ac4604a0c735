from typing import Any, Optional

from .protocols import Renderer


class MessageBus:
    def __init__(self):
        self._renderer: Optional[Renderer] = None

    def set_renderer(self, renderer: Optional[Renderer]):
        self._renderer = renderer

    def _render(self, level: str, template: str, **kwargs: Any) -> None:
        if not self._renderer:
            return

        if kwargs:
            try:
                message = template.format(**kwargs)
            except (KeyError, IndexError):
                message = f"<formatting_error for '{template}'>"
        else:
            # Pre-rendered lines (e.g. violation paths) may contain braces.
            message = template

        self._renderer.render(message, level)

    def debug(self, template: str, **kwargs: Any) -> None:
        self._render("debug", template, **kwargs)

    def info(self, template: str, **kwargs: Any) -> None:
        self._render("info", template, **kwargs)

    def success(self, template: str, **kwargs: Any) -> None:
        self._render("success", template, **kwargs)

    def warning(self, template: str, **kwargs: Any) -> None:
        self._render("warning", template, **kwargs)

    def error(self, template: str, **kwargs: Any) -> None:
        self._render("error", template, **kwargs)
