# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 11:30:05 2026

@author: bboyg
"""

import json
import logging
import os
from typing import Dict

import yaml

import ship
from ship_class import ShipClass
from simulation import Simulation, PHYSICS_TICK_LENGTH
from utils_frames import deg2rad

logger = logging.getLogger(__name__)


def load(filepath: str) -> Dict:
    """
    Reads a scenario file (.yaml / .yml / .json) into a plain dict.
    """
    _, ext = os.path.splitext(filepath)

    with open(filepath, "r") as f:
        if ext in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif ext == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"{filepath}: scenario must be a mapping")

    logger.info("Loaded scenario: %s", data.get("name", "Unknown"))
    return data


def build_simulation(data: Dict) -> Simulation:
    """
    Scenario dict -> populated Simulation.

    Ship entry keys:
        class     : ship class name (required)
        team      : int (default 0)
        position  : {x, y}
        velocity  : {x, y}
        heading / heading_deg
        radar     : overrides for the stock radar (heading / heading_deg,
                    width / width_deg, power, rx_cross_section, min_rssi,
                    classify_rssi)
    """
    sim = Simulation(
        name=data.get("name", "Untitled Scenario"),
        seed=data.get("seed", 0),
        dt=data.get("dt", PHYSICS_TICK_LENGTH),
    )

    for i, entry in enumerate(data.get("ships", [])):
        if "class" not in entry:
            raise ValueError(f"ship #{i}: missing 'class'")

        ship_class = ShipClass.from_name(entry["class"])
        team = int(entry.get("team", 0))
        ship_data = ship.STOCK[ship_class](team)

        overrides = _angles(entry.get("radar", {}) or {})
        if overrides:
            if ship_data.radar is None:
                raise ValueError(f"ship #{i}: {ship_class.value} carries no radar")
            ship_data.radar.configure(**overrides)

        pos = entry.get("position", {}) or {}
        vel = entry.get("velocity", {}) or {}
        heading = _angles({k: v for k, v in entry.items() if k in ("heading", "heading_deg")})

        ship.create(
            sim,
            float(pos.get("x", 0.0)), float(pos.get("y", 0.0)),
            float(vel.get("x", 0.0)), float(vel.get("y", 0.0)),
            heading.get("heading", 0.0),
            ship_data,
        )

    logger.info("%s: %d ships", sim.name, len(sim.ships))
    return sim


def load_simulation(filepath: str) -> Simulation:
    return build_simulation(load(filepath))


def _angles(fields: Dict) -> Dict:
    """Converts *_deg keys to their radian counterparts."""
    out = {}
    for key, value in fields.items():
        if key.endswith("_deg"):
            out[key[:-4]] = deg2rad(float(value))
        else:
            out[key] = value
    return out
