"""Typed text buffer and helpers for rendering it."""

from __future__ import annotations

from typing import Optional


class TextBuffer:
    """Growable buffer of characters typed onto the pad."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    def append(self, char: str) -> None:
        """Append a single character."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._chars.append(char)

    def pop(self) -> Optional[str]:
        """Remove and return the last character, or None when empty."""
        return self._chars.pop() if self._chars else None

    def clear(self) -> None:
        self._chars.clear()

    def __str__(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)


def replace(text: Optional[str], old: Optional[str], new: Optional[str]) -> str:
    """Replace every occurrence of old with new; any None argument yields ""."""
    if text is None or old is None or new is None:
        return ""
    if not old:
        raise ValueError("substring to replace must not be empty")
    return text.replace(old, new)


def append_string(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def format_for_display(text: Optional[str], highlight: bool) -> str:
    """Expand tabs and widen spaces for display; highlighted text drops underscores."""
    formatted = replace(replace(text, "\t", "    "), " ", "  ")
    if highlight:
        formatted = replace(formatted, "_", "")
    return formatted


def collision_detection(
    x1: int,
    y1: int,
    width1: int,
    height1: int,
    x2: int,
    y2: int,
    width2: int,
    height2: int,
) -> bool:
    """Return True when the two axis-aligned rectangles overlap."""
    return (
        x1 + width1 > x2
        and x1 < x2 + width2
        and y1 + height1 > y2
        and y1 < y2 + height2
    )


class Blinker:
    """On/off state that flips once every interval milliseconds."""

    def __init__(self, interval: int = 700) -> None:
        self.interval = interval
        self._state = False
        self._last_toggle = 0

    def state(self, now: int) -> bool:
        """Return the state at time now (milliseconds), toggling if due."""
        if now - self._last_toggle >= self.interval:
            self._state = not self._state
            self._last_toggle = now
        return self._state