"""
Interaction Controller
======================
Turns raw pointer events on the drawing surface into Point Store mutations.

Two states exist: IDLE and DRAWING. In DRAG mode a press starts DRAWING and
every move while drawing paints another point; release or leaving the surface
returns to IDLE. CLICK mode adds one point per press and never draws.
"""
from __future__ import annotations

import logging
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

from transformviz.model.geometry import CoordinateMapper

if TYPE_CHECKING:
    from transformviz.app.state import PointStore

logger = logging.getLogger(__name__)


class InteractionState(IntEnum):
    IDLE = 0
    DRAWING = 1


class InteractionMode(StrEnum):
    DRAG = "drag"
    CLICK = "click"


class InteractionController:
    """Pointer state machine writing to a :class:`PointStore`."""

    def __init__(
        self,
        point_store: PointStore,
        mapper: CoordinateMapper | None = None,
        mode: InteractionMode | str = InteractionMode.DRAG
    ) -> None:
        self.point_store = point_store
        self.mapper = mapper or CoordinateMapper()
        self.mode = InteractionMode(mode)
        self._state = InteractionState.IDLE

    @property
    def state(self) -> InteractionState:
        return self._state

    def _add(self, device_x: float, device_y: float) -> None:
        self.point_store.add_point(self.mapper.to_plane(device_x, device_y))

    def press(self, device_x: float, device_y: float) -> None:
        self._add(device_x, device_y)
        if self.mode is InteractionMode.DRAG:
            self._set_state(InteractionState.DRAWING)

    def move(self, device_x: float, device_y: float) -> None:
        if self._state is InteractionState.DRAWING:
            self._add(device_x, device_y)

    def release(self) -> None:
        self._set_state(InteractionState.IDLE)

    def leave(self) -> None:
        # Leaving the surface ends a stroke exactly like a release
        self.release()

    def _set_state(self, state: InteractionState) -> None:
        if state != self._state:
            logger.debug("Interaction %s -> %s", self._state.name, state.name)
            self._state = state
