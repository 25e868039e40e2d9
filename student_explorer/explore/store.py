from __future__ import annotations

import uuid
from collections import OrderedDict

from .controller import ExploreController

MAX_CONTROLLERS = 1000

_controllers: OrderedDict[str, ExploreController] = OrderedDict()


def get_or_create_controller(
    controller_id: str | None,
    max_controllers: int = MAX_CONTROLLERS,
) -> tuple[str, ExploreController]:
    """
    Return the controller for ``controller_id``, creating a new one if unknown.

    The least recently used controllers are dropped once more than
    ``max_controllers`` are held.
    """
    if controller_id and controller_id in _controllers:
        _controllers.move_to_end(controller_id)
        return controller_id, _controllers[controller_id]
    new_id = uuid.uuid4().hex
    controller = ExploreController()
    _controllers[new_id] = controller
    while len(_controllers) > max_controllers:
        _controllers.popitem(last=False)
    return new_id, controller


def controller_count() -> int:
    return len(_controllers)


def clear_controllers() -> None:
    _controllers.clear()
