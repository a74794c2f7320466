# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 09:41:03 2026

@author: bboyg
"""

import itertools
import logging
from typing import Dict, List

import numpy as np

import radar
from radar_face import Line
from ship import Ship, ShipData

logger = logging.getLogger(__name__)

PHYSICS_TICK_LENGTH = 1.0 / 60.0


class Simulation:
    """
    Minimal host world: ordered ship registry, tick counter, debug lines.

    step() advances positions, runs the radar pass once, then bumps the
    tick index.
    """

    def __init__(self, name: str = "sim", seed: int = 0, dt: float = PHYSICS_TICK_LENGTH):
        self.name = name
        self.seed = int(seed)
        self.dt = float(dt)

        self._ships: Dict[int, Ship] = {}
        self._handles = itertools.count()
        self._tick = 0

        self.debug_lines: Dict[int, List[Line]] = {}

    # ---------------------------------------------------------
    # Registry
    # ---------------------------------------------------------
    @property
    def ships(self) -> List[int]:
        """Live handles, in creation order."""
        return list(self._ships)

    def ship(self, handle: int) -> Ship:
        try:
            return self._ships[handle]
        except KeyError:
            raise KeyError(f"No live ship with handle {handle}") from None

    def add_ship(self, data: ShipData, position, velocity, heading: float = 0.0) -> int:
        handle = next(self._handles)
        self._ships[handle] = Ship(
            handle=handle,
            data=data,
            position=np.asarray(position, dtype=float).copy(),
            velocity=np.asarray(velocity, dtype=float).copy(),
            heading=float(heading),
        )
        logger.debug("added ship %d (%s, team %d)", handle, data.ship_class.value, data.team)
        return handle

    def remove_ship(self, handle: int):
        self.ship(handle)
        del self._ships[handle]
        self.debug_lines.pop(handle, None)

    def tick(self) -> int:
        return self._tick

    # ---------------------------------------------------------
    # Debug output
    # ---------------------------------------------------------
    def emit_debug_lines(self, handle: int, lines: List[Line]):
        self.debug_lines.setdefault(handle, []).extend(lines)

    # ---------------------------------------------------------
    # Main loop
    # ---------------------------------------------------------
    def step(self):
        self.debug_lines = {}

        for s in self._ships.values():
            s.position = s.position + s.velocity * self.dt

        for handle, lines in radar.tick(self).items():
            self.emit_debug_lines(handle, lines)

        self._tick += 1
