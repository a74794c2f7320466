# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 17:52:42 2026

@author: bboyg
"""

import logging

import numpy as np
import pandas as pd

import ship
from radar import scan
from simulation import Simulation
from utils_frames import deg2rad, angle_wrap

logger = logging.getLogger(__name__)


def sweep_controller(rate_rad_per_tick: float, handles=None):
    """
    Control logic that rotates radar heading a fixed step every tick.

    handles : ships to steer (default: every ship with a radar)
    """
    def control(sim: Simulation):
        targets = sim.ships if handles is None else handles
        for h in targets:
            radar = sim.ship(h).radar
            if radar is None:
                continue
            radar.configure(heading=angle_wrap(radar.heading + rate_rad_per_tick))
    return control


def duel_scenario(seed: int = 0) -> Simulation:
    """
    One fighter at the origin with a 60 deg beam, two team-1 targets on
    crossing paths, one team-0 wingman and an asteroid.
    """
    sim = Simulation("duel", seed=seed)

    ship.create(sim, 0.0, 0.0, 0.0, 0.0, 0.0, ship.fighter(0))
    ship.create(sim, 1000.0, -300.0, 0.0, 60.0, deg2rad(90), ship.target(1))
    ship.create(sim, -600.0, 1200.0, 40.0, -20.0, 0.0, ship.frigate(1))
    ship.create(sim, -200.0, -100.0, 0.0, 0.0, 0.0, ship.fighter(0))
    ship.create(sim, 2000.0, 2000.0, 0.0, 0.0, 0.0, ship.asteroid())

    return sim


def run_scenario(sim: Simulation, n_ticks: int, controller=None) -> pd.DataFrame:
    """
    Steps the simulation n_ticks times and logs every radar's result.

    controller(sim) is called before each step, standing in for ship
    control code.
    """
    rows = []
    for _ in range(int(n_ticks)):
        if controller is not None:
            controller(sim)

        tick = sim.tick()
        sim.step()

        for h in sim.ships:
            s = sim.ship(h)
            if s.radar is None:
                continue
            res = scan(sim, h)
            detected = res is not None
            rows.append({
                "tick": tick,
                "handle": h,
                "team": s.team,
                "x": float(s.position[0]),
                "y": float(s.position[1]),
                "radar_heading_rad": s.heading + s.radar.heading,
                "radar_width_rad": s.radar.width,
                "detected": detected,
                "ship_class": res.ship_class.value if detected and res.ship_class else None,
                "est_x": float(res.position[0]) if detected else np.nan,
                "est_y": float(res.position[1]) if detected else np.nan,
                "est_vx": float(res.velocity[0]) if detected else np.nan,
                "est_vy": float(res.velocity[1]) if detected else np.nan,
            })

    df = pd.DataFrame(rows, columns=[
        "tick", "handle", "team", "x", "y", "radar_heading_rad", "radar_width_rad",
        "detected", "ship_class", "est_x", "est_y", "est_vx", "est_vy",
    ])
    logger.info(
        "%s: %d ticks, %d radar rows, %d detections",
        sim.name, n_ticks, len(df), int(df["detected"].sum()),
    )
    return df
