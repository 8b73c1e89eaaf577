"""Window state: size, title, clear colour and frame bookkeeping."""

from __future__ import annotations

from typing import Any, Callable, Tuple

from catalyst.config import Config


class ScreenError(RuntimeError):
    """Raised when the screen cannot be opened or is used while closed."""


def _color(value: Any) -> Tuple[float, float, float, float]:
    components = tuple(float(c) for c in value)
    if len(components) != 4:
        raise ScreenError("clear colour needs four components")
    return components  # type: ignore[return-value]


# (group, key, attribute, converter). The window starts square, so the
# height is taken from the configured width.
_SETTINGS: Tuple[Tuple[str, str, str, Callable[[Any], Any]], ...] = (
    ("window", "width", "width", int),
    ("window", "width", "height", int),
    ("application", "title", "title", str),
    ("window", "clrCol", "clear_color", _color),
    ("application", "vSync", "vsync", bool),
)


class Screen:
    """The application window and its per-frame state."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self.title = ""
        self.clear_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        self.vsync = False
        self.iconified = False
        self.frames_presented = 0
        self._open = False
        self._close_requested = False
        self._in_frame = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def in_frame(self) -> bool:
        return self._in_frame

    def load_values_from(self, config: Config) -> None:
        """Read size, title, clear colour and vsync from ``config``.

        Raises ScreenError naming the first missing value.
        """
        for group, key, attribute, convert in _SETTINGS:
            if not config.has(group, key):
                raise ScreenError(f"missing configuration value {group}.{key}")
            setattr(self, attribute, convert(config.get(group, key)))

    def open(self, config: Config) -> None:
        """Load the window settings and open the window."""
        self.load_values_from(config)
        self._open = True

    def close(self) -> None:
        """Close the window."""
        self._open = False
        self._in_frame = False

    def begin_frame(self) -> bool:
        """Start a frame; returns False while the window is iconified."""
        if not self._open:
            raise ScreenError("screen is not open")
        if self.iconified:
            return False
        self._in_frame = True
        return True

    def end_frame(self) -> None:
        """Present the frame."""
        if not self._open:
            raise ScreenError("screen is not open")
        self.frames_presented += 1
        self._in_frame = False

    def close_window(self) -> None:
        """Ask for the window to close at the end of the current frame."""
        self._close_requested = True

    def should_close(self) -> bool:
        """Whether the main loop should stop."""
        return self._close_requested or not self._open