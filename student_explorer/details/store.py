from __future__ import annotations

import uuid
from collections import OrderedDict

from ..locations.models import Location
from .controller import DetailController

MAX_OPEN_VIEWS = 500

_views: OrderedDict[str, DetailController] = OrderedDict()


def open_view(location: Location, max_views: int = MAX_OPEN_VIEWS) -> tuple[str, DetailController]:
    """Open a detail view; the least recently used views are closed past ``max_views``."""
    view_id = uuid.uuid4().hex
    controller = DetailController(location)
    _views[view_id] = controller
    while len(_views) > max_views:
        _, evicted = _views.popitem(last=False)
        evicted.close()
    return view_id, controller


def get_view(view_id: str) -> DetailController | None:
    controller = _views.get(view_id)
    if controller is not None:
        _views.move_to_end(view_id)
    return controller


def close_view(view_id: str) -> bool:
    """Invalidate and forget a view. Returns ``False`` if it was not open."""
    controller = _views.pop(view_id, None)
    if controller is None:
        return False
    controller.close()
    return True


def clear_views() -> None:
    for controller in _views.values():
        controller.close()
    _views.clear()
