import asyncio
import threading
from unittest.mock import MagicMock

from student_explorer.display.models import DisplayMode, Viewport
from student_explorer.display.providers import ListDisplay
from student_explorer.explore.config import GeolocationConfig
from student_explorer.explore.controller import ExploreController
from student_explorer.explore.geolocation import (
    ConfiguredGeolocation,
    DeniedGeolocation,
    GeolocationProvider,
)
from student_explorer.explore.models import ViewMode
from student_explorer.explore.store import (
    clear_controllers,
    controller_count,
    get_or_create_controller,
)
from student_explorer.locations.models import Coordinates, Location

CAFE = Location(id="1", name="Cafe Central", address="Main St", rating=4.2)
BAR = Location(id="2", name="Library Bar", address="Side St", rating=3.8)


class _BrokenGeolocation(GeolocationProvider):
    async def request_permission(self) -> bool:
        return True

    async def current_position(self) -> Coordinates:
        raise RuntimeError("GPS off")


def _controller(loader=lambda: (CAFE, BAR), geolocation=None, display=None) -> ExploreController:
    return ExploreController(
        loader=loader,
        geolocation=geolocation or DeniedGeolocation(),
        display=display,
    )


def test_mount_loads_locations():
    controller = _controller()
    assert controller.state.loading is True

    asyncio.run(controller.mount())

    assert controller.state.loading is False
    assert controller.state.locations == (CAFE, BAR)


def test_mount_runs_once():
    loader = MagicMock(return_value=(CAFE,))
    controller = _controller(loader=loader)

    asyncio.run(controller.mount())
    asyncio.run(controller.mount())

    loader.assert_called_once()


def test_load_failure_still_ends_loading():
    def _broken():
        raise FileNotFoundError("locations.json")

    controller = _controller(loader=_broken)
    asyncio.run(controller.mount())

    assert controller.state.loading is False
    assert controller.state.locations == ()


def test_denied_permission_keeps_default_viewport():
    controller = _controller()
    asyncio.run(controller.mount())
    assert controller.state.viewport == Viewport()


def test_position_failure_keeps_default_viewport():
    controller = _controller(geolocation=_BrokenGeolocation())
    asyncio.run(controller.mount())
    assert controller.state.viewport == Viewport()
    assert controller.state.locations == (CAFE, BAR)


def test_granted_permission_recentres_viewport():
    geolocation = ConfiguredGeolocation(GeolocationConfig(device_latitude=46.5, device_longitude=23.1))
    controller = _controller(geolocation=geolocation)
    asyncio.run(controller.mount())

    viewport = controller.state.viewport
    assert (viewport.latitude, viewport.longitude) == (46.5, 23.1)
    assert viewport.latitude_delta == Viewport().latitude_delta


def test_unconfigured_geolocation_denies_permission():
    geolocation = ConfiguredGeolocation(GeolocationConfig(device_latitude=None, device_longitude=None))
    assert asyncio.run(geolocation.request_permission()) is False


def test_search_and_rating_toggle():
    controller = _controller()
    asyncio.run(controller.mount())

    controller.set_query("bar")
    assert controller.filtered() == [BAR]

    controller.set_query("")
    assert controller.toggle_rating_filter() == 4.0
    assert controller.filtered() == [CAFE]
    assert controller.toggle_rating_filter() == 0.0
    assert controller.filtered() == [CAFE, BAR]


def test_clear_filters():
    controller = _controller()
    asyncio.run(controller.mount())
    controller.set_query("nothing matches this")
    controller.toggle_rating_filter()
    assert controller.state.has_active_filters is True
    assert controller.filtered() == []

    controller.clear_filters()

    assert controller.state.has_active_filters is False
    assert controller.filtered() == [CAFE, BAR]


def test_view_mode():
    controller = _controller()
    controller.set_view_mode(ViewMode.map)
    assert controller.state.view_mode == ViewMode.map


def test_render_map_uses_filtered_locations_and_viewport():
    display = MagicMock()
    controller = _controller(display=display)
    asyncio.run(controller.mount())
    controller.set_query("cafe")
    controller.set_position(46.0, 23.0)

    controller.render_map(lambda loc: loc.id)

    args, _ = display.render.call_args
    assert args[0] == [CAFE]
    assert args[2].latitude == 46.0


def test_render_map_with_list_fallback():
    controller = _controller(display=ListDisplay())
    asyncio.run(controller.mount())

    result = controller.render_map(lambda loc: f"/locations/{loc.id}")

    assert result.mode == DisplayMode.list
    assert [row.location_id for row in result.rows] == ["1", "2"]


def test_catalogue_loader_runs_off_the_event_loop_thread():
    threads = {}

    def loader():
        threads["loader"] = threading.get_ident()
        return (CAFE,)

    async def scenario():
        threads["loop"] = threading.get_ident()
        controller = _controller(loader=loader)
        await controller.mount()
        return controller

    controller = asyncio.run(scenario())
    assert controller.state.locations == (CAFE,)
    assert threads["loader"] != threads["loop"]


def test_controller_store_is_capped():
    clear_controllers()
    first_id, first = get_or_create_controller(None, max_controllers=2)
    second_id, _ = get_or_create_controller(None, max_controllers=2)
    get_or_create_controller(first_id, max_controllers=2)
    get_or_create_controller(None, max_controllers=2)

    assert controller_count() == 2
    assert get_or_create_controller(first_id)[1] is first
    assert get_or_create_controller(second_id)[0] != second_id
    clear_controllers()
