# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 08:45:32 2026

@author: bboyg
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from utils_frames import TAU, unit_vector, cross2


@dataclass(frozen=True)
class Line:
    """
    Debug line segment, world frame.

    color : RGBA, each 0..1
    """
    a: np.ndarray
    b: np.ndarray
    color: Tuple[float, float, float, float]


@dataclass(frozen=True)
class BeamSector:
    """
    Angular sector swept by one radar beam during a tick.

    All angles are radians, world frame, CCW from +x.
      - start_bearing = beam center - width/2
      - end_bearing   = beam center + width/2
      - width >= 2pi covers every direction
      - width == 0 covers nothing
    """
    center: np.ndarray
    width: float
    start_bearing: float
    end_bearing: float

    @staticmethod
    def from_heading(center, heading_rad: float, width_rad: float):
        center = np.asarray(center, dtype=float).copy()
        return BeamSector(
            center=center,
            width=float(width_rad),
            start_bearing=heading_rad - 0.5 * width_rad,
            end_bearing=heading_rad + 0.5 * width_rad,
        )

    @property
    def heading(self) -> float:
        return 0.5 * (self.start_bearing + self.end_bearing)

    def contains(self, point) -> bool:
        if self.width >= TAU:
            return True
        if self.width <= 0.0:
            return False

        ray0 = unit_vector(self.start_bearing)
        ray1 = unit_vector(self.end_bearing)
        dp = np.asarray(point, dtype=float) - self.center

        # sector edges are ray0 -> ray1 going counter-clockwise
        turn = cross2(ray0, ray1)
        if turn <= 0.0 and self.width < np.pi:
            # edges collapsed onto one ray at float precision
            return False
        if turn > 0.0:
            # narrower than half a turn: CCW of ray0 and CW of ray1
            return cross2(ray0, dp) >= 0.0 and cross2(ray1, dp) < 0.0
        # half a turn or wider: everything except the cone between ray1 and ray0
        return cross2(ray1, dp) < 0.0 or cross2(ray0, dp) >= 0.0
