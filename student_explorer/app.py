from __future__ import annotations

import os

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from starlette.middleware.sessions import SessionMiddleware

from .details.controller import DetailController, GenerationInProgress
from .details.models import DetailViewResponse
from .details.reservation import ReservationResult, get_launcher
from .details.store import close_view, get_view, open_view
from .display.models import DisplayResult
from .display.providers import SelectHandler
from .explore.controller import ExploreController
from .explore.models import (
    ExploreResponse,
    PositionRequest,
    SearchRequest,
    ViewModeRequest,
)
from .explore.store import get_or_create_controller
from .locations.data_store import get_location, get_locations
from .locations.filtering import filter_locations, has_active_filters
from .locations.models import Location, LocationListResponse
from .profile.summary import ProfileResponse, build_profile

app = FastAPI(title="Student Explorer API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "student-explorer-secret-change-in-production"),
)


async def explore_controller(request: Request) -> ExploreController:
    """Return this client's explore controller, mounting it on first use."""
    controller_id, controller = get_or_create_controller(request.session.get("explore_id"))
    request.session["explore_id"] = controller_id
    await controller.mount()
    return controller


def _explore_response(controller: ExploreController) -> ExploreResponse:
    state = controller.state
    filtered = controller.filtered()
    return ExploreResponse(
        loading=state.loading,
        query=state.query,
        min_rating=state.min_rating,
        view_mode=state.view_mode,
        viewport=state.viewport,
        has_active_filters=state.has_active_filters,
        locations=filtered,
        total=len(filtered),
    )


def _detail_link(request: Request) -> SelectHandler:
    return lambda location: str(request.url_for("location_detail", location_id=location.id))


def _require_view(view_id: str) -> DetailController:
    controller = get_view(view_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="Detail view not found")
    return controller


def _detail_response(view_id: str, controller: DetailController) -> DetailViewResponse:
    state = controller.state
    return DetailViewResponse(
        view_id=view_id,
        location=state.location,
        description=state.description,
        status=state.status,
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/profile", response_model=ProfileResponse)
def profile() -> ProfileResponse:
    return build_profile(get_locations())


# ── Locations ────────────────────────────────────────────────────────────


@app.get("/locations", response_model=LocationListResponse)
def list_locations(
    q: str = Query(default="", max_length=200),
    min_rating: float = Query(default=0.0, ge=0.0, le=5.0),
) -> LocationListResponse:
    matches = filter_locations(get_locations(), q, min_rating)
    return LocationListResponse(
        locations=matches,
        total=len(matches),
        has_active_filters=has_active_filters(q, min_rating),
    )


@app.get("/locations/{location_id}", response_model=Location, name="location_detail")
def location_detail(location_id: str) -> Location:
    location = get_location(location_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


# ── Explore screen ───────────────────────────────────────────────────────


@app.get("/explore", response_model=ExploreResponse)
def explore(controller: ExploreController = Depends(explore_controller)) -> ExploreResponse:
    return _explore_response(controller)


@app.post("/explore/search", response_model=ExploreResponse)
def explore_search(
    body: SearchRequest,
    controller: ExploreController = Depends(explore_controller),
) -> ExploreResponse:
    controller.set_query(body.query)
    return _explore_response(controller)


@app.post("/explore/rating-filter", response_model=ExploreResponse)
def explore_rating_filter(controller: ExploreController = Depends(explore_controller)) -> ExploreResponse:
    controller.toggle_rating_filter()
    return _explore_response(controller)


@app.post("/explore/clear", response_model=ExploreResponse)
def explore_clear(controller: ExploreController = Depends(explore_controller)) -> ExploreResponse:
    controller.clear_filters()
    return _explore_response(controller)


@app.post("/explore/view", response_model=ExploreResponse)
def explore_view(
    body: ViewModeRequest,
    controller: ExploreController = Depends(explore_controller),
) -> ExploreResponse:
    controller.set_view_mode(body.mode)
    return _explore_response(controller)


@app.post("/explore/position", response_model=ExploreResponse)
def explore_position(
    body: PositionRequest,
    controller: ExploreController = Depends(explore_controller),
) -> ExploreResponse:
    controller.set_position(body.latitude, body.longitude)
    return _explore_response(controller)


@app.get("/explore/map", response_model=DisplayResult)
def explore_map(
    request: Request,
    controller: ExploreController = Depends(explore_controller),
) -> DisplayResult:
    return controller.render_map(_detail_link(request))


@app.get("/explore/map.html", response_class=HTMLResponse)
def explore_map_html(
    request: Request,
    controller: ExploreController = Depends(explore_controller),
) -> HTMLResponse:
    result = controller.render_map(_detail_link(request))
    return HTMLResponse(result.html)


# ── Detail screen ────────────────────────────────────────────────────────


@app.post("/details/{location_id}", response_model=DetailViewResponse)
def open_detail(location_id: str) -> DetailViewResponse:
    location = get_location(location_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")
    view_id, controller = open_view(location)
    return _detail_response(view_id, controller)


@app.get("/details/views/{view_id}", response_model=DetailViewResponse)
def detail_view(view_id: str) -> DetailViewResponse:
    return _detail_response(view_id, _require_view(view_id))


@app.post("/details/views/{view_id}/vibe", response_model=DetailViewResponse)
async def detail_vibe(view_id: str) -> DetailViewResponse:
    controller = _require_view(view_id)
    try:
        await controller.generate_vibe()
    except GenerationInProgress:
        raise HTTPException(status_code=409, detail="Descrierea se generează deja.")
    except Exception as exc:
        raise HTTPException(
            status_code=502,
            detail="Nu s-a putut genera descrierea. Te rugăm să încerci din nou.",
        ) from exc
    return _detail_response(view_id, controller)


@app.post("/details/views/{view_id}/reserve", response_model=ReservationResult)
def detail_reserve(view_id: str) -> ReservationResult:
    return _require_view(view_id).reserve(get_launcher())


@app.delete("/details/views/{view_id}")
def detail_close(view_id: str) -> dict[str, str]:
    if not close_view(view_id):
        raise HTTPException(status_code=404, detail="Detail view not found")
    return {"status": "closed"}
