from __future__ import annotations


class LifetimeToken:
    """Marks whether the view that started an async operation is still open."""

    def __init__(self) -> None:
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def invalidate(self) -> None:
        self._active = False
