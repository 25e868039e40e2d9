from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..llm.groq_client import generate_vibe
from ..locations.models import Location
from .lifetime import LifetimeToken
from .models import DetailState, GenerationStatus
from .reservation import Launcher, ReservationResult, hand_off_reservation

logger = logging.getLogger(__name__)

DescriptionGenerator = Callable[[str], Awaitable[str]]


class GenerationInProgress(RuntimeError):
    pass


class DetailController:
    """State and actions of one open detail view."""

    def __init__(
        self,
        location: Location,
        generator: DescriptionGenerator = generate_vibe,
    ) -> None:
        self.state = DetailState(location=location, description=location.short_description)
        self._generator = generator
        self._token = LifetimeToken()

    @property
    def active(self) -> bool:
        return self._token.active

    async def generate_vibe(self) -> str:
        """
        Replace the displayed description with an enhanced one.

        Raises ``GenerationInProgress`` if a generation is already running
        for this view. If the view is closed before the result arrives the
        result is dropped and the state is left as it was.
        """
        if self.state.is_generating:
            raise GenerationInProgress(self.state.location.id)

        token = self._token
        self.state.status = GenerationStatus.generating
        try:
            description = await self._generator(self.state.location.short_description)
            if not token.active:
                logger.info("Detail view for %s closed, discarding generated description", self.state.location.id)
                return description
            self.state.description = description
            self.state.status = GenerationStatus.done
            return description
        except Exception:
            logger.warning("Error generating description for %s", self.state.location.id, exc_info=True)
            raise
        finally:
            # cancelled or failed runs must not leave the view busy
            if token.active and self.state.is_generating:
                self.state.status = GenerationStatus.failed

    def reserve(self, launcher: Launcher) -> ReservationResult:
        return hand_off_reservation(self.state.location, launcher)

    def close(self) -> None:
        self._token.invalidate()
