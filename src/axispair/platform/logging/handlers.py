"""Rich console handler for axispair log records.

Where: platform/logging/handlers.py
What: Render records that carry an ``axis`` extra with a coloured axis marker.
Why: Keep formatting concerns out of logger setup.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class AxisRichHandler(RichHandler):
    """Rich handler that prefixes axis-tagged records with an axis marker."""

    _AXIS_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "horizontal": ("↔", "cyan"),
        "vertical": ("↕", "magenta"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_axis_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying an ``axis`` extra."""

        axis = getattr(record, "axis", None)
        if axis is None:
            return None

        icon, color = self._AXIS_STYLES.get(str(axis), ("?", "yellow"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with an axis marker when the record names an axis."""

        axis_text = self._render_axis_message(record, message)
        if axis_text is not None:
            return axis_text

        return super().render_message(record, message)


__all__ = ["AxisRichHandler"]
