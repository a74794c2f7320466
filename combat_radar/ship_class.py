# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 08:10:37 2026

@author: bboyg
"""

from enum import Enum


class ShipClass(Enum):
    FIGHTER = "fighter"
    FRIGATE = "frigate"
    CRUISER = "cruiser"
    ASTEROID = "asteroid"
    TARGET = "target"
    MISSILE = "missile"
    TORPEDO = "torpedo"

    @staticmethod
    def from_name(name: str) -> "ShipClass":
        try:
            return ShipClass(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown ship class: {name!r}") from None


# Radar cross section [units^2] seen by other radars
RADAR_CROSS_SECTION = {
    ShipClass.FIGHTER: 5.0,
    ShipClass.FRIGATE: 20.0,
    ShipClass.CRUISER: 40.0,
    ShipClass.ASTEROID: 50.0,
    ShipClass.TARGET: 10.0,
    ShipClass.MISSILE: 1.0,
    ShipClass.TORPEDO: 2.0,
}
