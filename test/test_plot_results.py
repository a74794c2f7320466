# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 13:02:09 2026

@author: bboyg
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt

import main
from plot_results import load_output, plot_debug_lines, plot_detections, plot_detection_rate
from scenarios import duel_scenario, run_scenario


def test_plots_from_scenario():
    sim = duel_scenario()
    df = run_scenario(sim, 10)

    ax = plot_detections(df)
    plot_debug_lines(sim.debug_lines, ax=ax)
    assert len(ax.collections) >= 1

    ax2 = plot_detection_rate(df)
    assert len(ax2.lines) == 1
    plt.close("all")


def test_debug_lines_empty_ok():
    ax = plot_debug_lines([])
    assert len(ax.collections) == 0
    plt.close("all")


def test_main_writes_csv(tmp_path):
    out = tmp_path / "radar_output.csv"
    df = main.main(["--ticks", "5", "--sweep-deg", "2", "--out", str(out), "--log-level", "WARNING"])
    assert out.exists()

    back = load_output(str(out))
    assert len(back) == len(df)
    assert list(back.columns) == list(df.columns)
