# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:04:22 2026

@author: bboyg
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from radar_face import BeamSector, Line
from radar_params import ScanResult
from rng import new_rng
from ship_class import ShipClass
from utils_frames import TAU

logger = logging.getLogger(__name__)

# Floor on squared emitter -> reflector distance (co-located ships)
MIN_DISTANCE_SQ = 1.0

# Nominal target used only to size the debug wedge
NOMINAL_TARGET_CROSS_SECTION = 5.0

WEDGE_SEGMENTS = 20
WEDGE_COLOR = (0.1, 0.2, 0.3, 1.0)


@dataclass(frozen=True)
class RadarEmitter:
    """
    One scanning ship's radar for the current tick.
    """
    handle: int
    team: int
    sector: BeamSector
    power: float
    rx_cross_section: float
    min_rssi: float
    classify_rssi: float

    @property
    def center(self) -> np.ndarray:
        return self.sector.center

    @property
    def width(self) -> float:
        return self.sector.width


@dataclass(frozen=True)
class RadarReflector:
    """
    Tick-start copy of one ship, as seen by every radar.
    """
    handle: int
    team: int
    position: np.ndarray
    velocity: np.ndarray
    radar_cross_section: float
    ship_class: ShipClass


# ============================================================
# Snapshot
# ============================================================

def build_reflectors(sim) -> List[RadarReflector]:
    """
    Copies every live ship, in registry order.

    Must run before any result of this tick is written; later mutation of
    the ships does not reach the returned values.
    """
    reflectors = []
    for handle in sim.ships:
        ship = sim.ship(handle)
        reflectors.append(RadarReflector(
            handle=handle,
            team=ship.data.team,
            position=np.array(ship.position, dtype=float),
            velocity=np.array(ship.velocity, dtype=float),
            radar_cross_section=float(ship.data.radar_cross_section),
            ship_class=ship.data.ship_class,
        ))
    return reflectors


def build_emitter(sim, handle: int) -> Optional[RadarEmitter]:
    ship = sim.ship(handle)
    radar = ship.data.radar
    if radar is None:
        return None

    return RadarEmitter(
        handle=handle,
        team=ship.data.team,
        sector=BeamSector.from_heading(
            ship.position, ship.heading + radar.heading,
            float(np.clip(radar.width, 0.0, TAU)),
        ),
        power=radar.power,
        rx_cross_section=radar.rx_cross_section,
        min_rssi=radar.min_rssi,
        classify_rssi=radar.classify_rssi,
    )


# ============================================================
# Signal model
# ============================================================

def compute_rssi(emitter: RadarEmitter, reflector: RadarReflector) -> float:
    """
    Received intensity for one emitter / reflector pair.

        rssi = P * sigma_tgt * A_rx / (2pi * width * R^2)

    Power is spread over the swept sector and falls off with R^2.
    """
    d = reflector.position - emitter.center
    r_sq = float(np.dot(d, d))
    if r_sq < MIN_DISTANCE_SQ:
        logger.debug(
            "ship %d and ship %d nearly co-located (R^2=%.3g); clamping to %.3g",
            emitter.handle, reflector.handle, r_sq, MIN_DISTANCE_SQ,
        )
        r_sq = MIN_DISTANCE_SQ

    return (
        emitter.power * reflector.radar_cross_section * emitter.rx_cross_section
        / (TAU * emitter.width * r_sq)
    )


def compute_approx_range(emitter: RadarEmitter) -> float:
    """
    Range at which a nominal target drops to min_rssi (display only).
    """
    if emitter.width <= 0.0 or emitter.min_rssi <= 0.0:
        return 0.0
    return float(np.sqrt(
        emitter.power * NOMINAL_TARGET_CROSS_SECTION * emitter.rx_cross_section
        / (TAU * emitter.width * emitter.min_rssi)
    ))


# ============================================================
# Target selection
# ============================================================

def select_target(emitter: RadarEmitter, reflectors: Sequence[RadarReflector]):
    """
    Strongest in-beam, opposing-team reflector above min_rssi.

    Returns (reflector, rssi), or (None, min_rssi) when nothing qualifies.
    Ties keep the first reflector seen.
    """
    best_rssi = emitter.min_rssi
    best = None
    for reflector in reflectors:
        if reflector.team == emitter.team:
            continue
        if not emitter.sector.contains(reflector.position):
            continue

        rssi = compute_rssi(emitter, reflector)
        if rssi > best_rssi:
            best = reflector
            best_rssi = rssi
    return best, best_rssi


def noise(rng: np.random.Generator, rssi: float) -> np.ndarray:
    """
    2D unit Gaussian sample scaled by 1/rssi.
    """
    return rng.standard_normal(2) * (1.0 / rssi)


def assemble_result(emitter: RadarEmitter, reflector: Optional[RadarReflector],
                    rssi: float, rng: np.random.Generator) -> Optional[ScanResult]:
    if reflector is None:
        return None

    ship_class = reflector.ship_class if rssi > emitter.classify_rssi else None
    # position is always drawn before velocity
    position = reflector.position + noise(rng, rssi)
    velocity = reflector.velocity + noise(rng, rssi)
    return ScanResult(ship_class=ship_class, position=position, velocity=velocity)


# ============================================================
# Debug wedge
# ============================================================

def wedge_lines(emitter: RadarEmitter, n: int = WEDGE_SEGMENTS, color=WEDGE_COLOR) -> List[Line]:
    """
    Approximate sector outline: n arc segments at the nominal range plus
    both edge rays.
    """
    sector = emitter.sector
    center = sector.center
    r = compute_approx_range(emitter)
    w = sector.end_bearing - sector.start_bearing

    def at(angle):
        return center + r * np.array([np.cos(angle), np.sin(angle)])

    lines = []
    for i in range(n):
        angle_a = sector.start_bearing + w * i / n
        angle_b = sector.start_bearing + w * (i + 1) / n
        lines.append(Line(a=at(angle_a), b=at(angle_b), color=color))

    lines.append(Line(a=center.copy(), b=at(sector.start_bearing), color=color))
    lines.append(Line(a=center.copy(), b=at(sector.end_bearing), color=color))
    return lines


# ============================================================
# Per-tick entry points
# ============================================================

def tick(sim) -> Dict[int, List[Line]]:
    """
    Runs every radar once against a single snapshot of the world.

    Writes each radar's result and returns the debug wedge lines keyed by
    emitting ship handle.
    """
    reflectors = build_reflectors(sim)
    rng = new_rng(sim.tick(), getattr(sim, "seed", 0))

    debug = {}
    n_radars = 0
    n_detections = 0
    for reflector in reflectors:
        emitter = build_emitter(sim, reflector.handle)
        if emitter is None:
            continue
        n_radars += 1

        best, best_rssi = select_target(emitter, reflectors)
        result = assemble_result(emitter, best, best_rssi, rng)
        if result is not None:
            n_detections += 1
            logger.debug(
                "tick %d: ship %d -> ship %d rssi=%.4g classified=%s",
                sim.tick(), emitter.handle, best.handle, best_rssi,
                result.ship_class is not None,
            )

        sim.ship(emitter.handle).data.radar.result = result
        debug[emitter.handle] = wedge_lines(emitter)

    logger.debug("tick %d: %d radars, %d detections", sim.tick(), n_radars, n_detections)
    return debug


def scan(sim, handle: int) -> Optional[ScanResult]:
    """
    Last result of this ship's radar (None if no radar or no contact).
    """
    radar = sim.ship(handle).data.radar
    if radar is None:
        return None
    return radar.result
