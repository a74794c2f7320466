# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 08:38:11 2026

@author: bboyg
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from ship_class import ShipClass
from utils_frames import TAU, angle_wrap

logger = logging.getLogger(__name__)


class RadarConfigError(ValueError):
    """Raised when control code sets an unusable radar parameter."""


@dataclass(frozen=True)
class ScanResult:
    """
    One radar contact, as reported to the owning ship.

    ship_class : target class, only when the return was strong enough
    position   : noisy position estimate, shape (2,)
    velocity   : noisy velocity estimate, shape (2,)
    """
    ship_class: Optional[ShipClass]
    position: np.ndarray
    velocity: np.ndarray


@dataclass
class Radar:
    """
    Radar configuration + last scan result for one ship.

    heading          : beam center, relative to ship heading [rad]
    width            : full sector width [rad], 0..2pi (2pi = no restriction)
    power            : emitted power
    rx_cross_section : receiver effective aperture
    min_rssi         : detection floor
    classify_rssi    : classification floor (normally >= min_rssi)

    result is written by the radar tick only.
    """

    heading: float = 0.0
    width: float = TAU / 6.0
    power: float = 20e3
    rx_cross_section: float = 5.0
    min_rssi: float = 1e-2
    classify_rssi: float = 1e-1
    result: Optional[ScanResult] = field(default=None, compare=False)

    CONFIG_FIELDS = (
        "heading", "width", "power", "rx_cross_section",
        "min_rssi", "classify_rssi",
    )

    def __post_init__(self):
        self.configure(**{name: getattr(self, name) for name in self.CONFIG_FIELDS})

    def configure(self, **fields):
        """
        Set one or more configuration fields between ticks.

        Values are validated before anything is assigned, so a rejected
        call leaves the radar unchanged.
        """
        unknown = set(fields) - set(self.CONFIG_FIELDS)
        if unknown:
            raise RadarConfigError(f"Unknown radar field(s): {sorted(unknown)}")

        clean = {name: _CHECKS[name](float(value)) for name, value in fields.items()}
        for name, value in clean.items():
            setattr(self, name, value)

        if self.classify_rssi < self.min_rssi:
            logger.warning(
                "classify_rssi %.3g below min_rssi %.3g; every detection will be classified",
                self.classify_rssi, self.min_rssi,
            )
        return self

    @property
    def full_circle(self) -> bool:
        return self.width >= TAU


# ------------------------------------------------------------
# Field validators
# ------------------------------------------------------------
def _check_heading(value: float) -> float:
    if not np.isfinite(value):
        raise RadarConfigError(f"heading must be finite, got {value}")
    return float(angle_wrap(value))


def _check_width(value: float) -> float:
    if not np.isfinite(value) or value < 0.0:
        raise RadarConfigError(f"width must be finite and >= 0, got {value}")
    # anything past one full turn is the same sector
    return float(min(value, TAU))


def _check_non_negative(name):
    def check(value: float) -> float:
        if not np.isfinite(value) or value < 0.0:
            raise RadarConfigError(f"{name} must be finite and >= 0, got {value}")
        return value
    return check


def _check_threshold(name):
    def check(value: float) -> float:
        if np.isnan(value) or value < 0.0:
            raise RadarConfigError(f"{name} must be >= 0, got {value}")
        return value
    return check


_CHECKS = {
    "heading": _check_heading,
    "width": _check_width,
    "power": _check_non_negative("power"),
    "rx_cross_section": _check_non_negative("rx_cross_section"),
    "min_rssi": _check_threshold("min_rssi"),
    "classify_rssi": _check_threshold("classify_rssi"),
}
