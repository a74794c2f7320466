# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 12:52:22 2026

@author: bboyg
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection


def load_output(csv_path="radar_output.csv"):
    df = pd.read_csv(csv_path)
    return df


def _flatten(lines):
    """Accepts a list of Line or a {handle: [Line, ...]} mapping."""
    if isinstance(lines, dict):
        out = []
        for ls in lines.values():
            out.extend(ls)
        return out
    return list(lines)


def plot_debug_lines(lines, ax=None):
    """Draw radar sector wedges (debug Line segments) in world coordinates."""
    lines = _flatten(lines)
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 7))

    if not lines:
        return ax

    segs = [[tuple(ln.a), tuple(ln.b)] for ln in lines]
    colors = [ln.color for ln in lines]
    ax.add_collection(LineCollection(segs, colors=colors, linewidths=1.0))

    pts = np.array([p for seg in segs for p in seg], dtype=float)
    pad = 0.05 * max(np.ptp(pts[:, 0]), np.ptp(pts[:, 1]), 1.0)
    ax.set_xlim(pts[:, 0].min() - pad, pts[:, 0].max() + pad)
    ax.set_ylim(pts[:, 1].min() - pad, pts[:, 1].max() + pad)
    ax.set_aspect("equal", adjustable="datalim")
    return ax


def plot_detections(df, ax=None, show=False):
    """
    Scatter noisy target estimates per emitter, plus emitter tracks.

    Uses: handle, x, y, detected, est_x, est_y, ship_class
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    det = df["detected"].to_numpy().astype(bool)

    for handle, g in df.groupby("handle"):
        ax.plot(g["x"].to_numpy(), g["y"].to_numpy(), "-", lw=1.0,
                label=f"ship {handle} track")

        m = g["detected"].to_numpy().astype(bool)
        if not m.any():
            continue
        classified = g["ship_class"].notna().to_numpy() & m
        ax.plot(g["est_x"].to_numpy()[m & ~classified], g["est_y"].to_numpy()[m & ~classified],
                ".", ms=3, label=f"ship {handle} contacts")
        ax.plot(g["est_x"].to_numpy()[classified], g["est_y"].to_numpy()[classified],
                "x", ms=4, label=f"ship {handle} classified")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(f"Radar contacts ({int(det.sum())} detections)")
    ax.grid(True)
    ax.legend(fontsize="small")

    if show:
        plt.show()
    return ax


def plot_detection_rate(df, show=False):
    """Fraction of radars holding a contact, per tick."""
    rate = df.groupby("tick")["detected"].mean()

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(rate.index.to_numpy(), rate.to_numpy(), ".-")
    ax.set_xlabel("Tick")
    ax.set_ylabel("Detection fraction")
    ax.set_ylim(-0.05, 1.05)
    ax.set_title("Radar detection rate")
    ax.grid(True)

    if show:
        plt.show()
    return ax
