"""Observable model of a mouse pointer's position and button state over a view."""

from __future__ import annotations

from typing import Protocol

from duikit.geometry import Point


def point_to_string(point: Point) -> str:
    """Format a point as ``{x, y}``."""
    return f"{{{point.x}, {point.y}}}"


class MouseModelObserver(Protocol):
    def on_model_changed(self, model: MouseModel) -> None: ...


class MouseModel:
    """Tracks pointer position, hover and press; notifies an observer on change."""

    def __init__(self) -> None:
        self.point = Point()
        self.mouse_in = False
        self.mouse_down = False
        self._observer: MouseModelObserver | None = None

    def set_observer(self, observer: MouseModelObserver | None) -> None:
        self._observer = observer

    def _notify(self) -> None:
        if self._observer is not None:
            self._observer.on_model_changed(self)

    def set_point(self, point: Point) -> None:
        if point != self.point:
            self.point = Point(point.x, point.y)
            self._notify()

    def set_mouse_in(self, value: bool) -> None:
        if value != self.mouse_in:
            self.mouse_in = value
            self._notify()

    def set_mouse_down(self, value: bool) -> None:
        if value != self.mouse_down:
            self.mouse_down = value
            self._notify()

    def __str__(self) -> str:
        text = point_to_string(self.point)
        text += " in" if self.mouse_in else " out"
        text += ", down" if self.mouse_down else ", up"
        return text