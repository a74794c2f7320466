# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 09:20:14 2026

@author: bboyg
"""

from dataclasses import dataclass, field
from typing import Optional
import numpy as np

from radar_params import Radar
from ship_class import ShipClass, RADAR_CROSS_SECTION
from utils_frames import TAU


@dataclass
class ShipData:
    """
    Per-ship equipment and identity.

    ship_class          : ShipClass
    team                : ships on the same team never detect each other
    radar_cross_section : reflectivity seen by other radars
    radar               : None for ships without a radar
    """
    ship_class: ShipClass
    team: int
    radar_cross_section: float
    radar: Optional[Radar] = None


@dataclass
class Ship:
    """
    Live ship state, world frame.

    position : [x, y]
    velocity : [vx, vy] per second
    heading  : [rad], CCW from +x
    """
    handle: int
    data: ShipData
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    heading: float = 0.0

    @property
    def team(self) -> int:
        return self.data.team

    @property
    def radar(self) -> Optional[Radar]:
        return self.data.radar


# ------------------------------------------------------------
# Stock ship definitions
# ------------------------------------------------------------
def _ship_data(ship_class: ShipClass, team: int, radar: Optional[Radar]) -> ShipData:
    return ShipData(
        ship_class=ship_class,
        team=int(team),
        radar_cross_section=RADAR_CROSS_SECTION[ship_class],
        radar=radar,
    )


def fighter(team: int) -> ShipData:
    return _ship_data(ShipClass.FIGHTER, team, Radar(
        width=TAU / 6.0, power=20e3, rx_cross_section=5.0,
        min_rssi=1e-2, classify_rssi=1e-1,
    ))


def frigate(team: int) -> ShipData:
    return _ship_data(ShipClass.FRIGATE, team, Radar(
        width=TAU / 6.0, power=100e3, rx_cross_section=10.0,
        min_rssi=1e-2, classify_rssi=1e-1,
    ))


def cruiser(team: int) -> ShipData:
    return _ship_data(ShipClass.CRUISER, team, Radar(
        width=TAU / 4.0, power=200e3, rx_cross_section=20.0,
        min_rssi=1e-2, classify_rssi=1e-1,
    ))


def missile(team: int) -> ShipData:
    # seekers only need a position fix, never a class
    return _ship_data(ShipClass.MISSILE, team, Radar(
        width=TAU / 6.0, power=10e3, rx_cross_section=2.0,
        min_rssi=1e-2, classify_rssi=np.inf,
    ))


def torpedo(team: int) -> ShipData:
    return _ship_data(ShipClass.TORPEDO, team, Radar(
        width=TAU / 6.0, power=20e3, rx_cross_section=3.0,
        min_rssi=1e-2, classify_rssi=np.inf,
    ))


def target(team: int) -> ShipData:
    return _ship_data(ShipClass.TARGET, team, None)


def asteroid() -> ShipData:
    # asteroids belong to no team
    return _ship_data(ShipClass.ASTEROID, -1, None)


STOCK = {
    ShipClass.FIGHTER: fighter,
    ShipClass.FRIGATE: frigate,
    ShipClass.CRUISER: cruiser,
    ShipClass.MISSILE: missile,
    ShipClass.TORPEDO: torpedo,
    ShipClass.TARGET: target,
    ShipClass.ASTEROID: lambda team=-1: asteroid(),
}


def create(sim, x: float, y: float, vx: float, vy: float, heading: float, data: ShipData) -> int:
    """
    Add a ship to the simulation and return its handle.
    """
    return sim.add_ship(
        data,
        position=np.array([x, y], dtype=float),
        velocity=np.array([vx, vy], dtype=float),
        heading=float(heading),
    )
