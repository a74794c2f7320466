# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 08:46:31 2026

@author: bboyg
"""

import argparse
import logging

import scenario_loader
from scenarios import duel_scenario, run_scenario, sweep_controller
from utils_frames import deg2rad


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Run a radar scenario and log every scan.")
    p.add_argument("--scenario", default=None,
                   help="scenario file (.yaml/.yml/.json); default: built-in duel")
    p.add_argument("--ticks", type=int, default=600)
    p.add_argument("--sweep-deg", type=float, default=0.0,
                   help="radar heading step per tick [deg] (0 = fixed)")
    p.add_argument("--out", default="radar_output.csv")
    p.add_argument("--plot", action="store_true")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.scenario:
        sim = scenario_loader.load_simulation(args.scenario)
    else:
        sim = duel_scenario()

    controller = None
    if args.sweep_deg:
        controller = sweep_controller(deg2rad(args.sweep_deg))

    df = run_scenario(sim, args.ticks, controller=controller)
    df.to_csv(args.out, index=False)

    print(f"Saved {args.out}")
    print("Detections:", int(df["detected"].sum()), "of", len(df), "radar scans")
    print("Classified:", int(df["ship_class"].notna().sum()))

    if args.plot:
        import matplotlib.pyplot as plt
        from plot_results import plot_debug_lines, plot_detections

        ax = plot_detections(df)
        plot_debug_lines(sim.debug_lines, ax=ax)
        plt.show()

    return df


if __name__ == "__main__":
    main()
