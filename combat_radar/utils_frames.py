# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 07:48:22 2026

@author: bboyg
"""

import numpy as np

TAU = 2.0 * np.pi


# ============================================================
# Angle utilities
# ============================================================

def deg2rad(deg: float) -> float:
    """
    Converts angle from degrees to radians.

    """
    return deg * np.pi / 180.0


def rad2deg(rad: float) -> float:
    """
    Converts angle from radians to degrees.

    """
    return rad * 180.0 / np.pi


def angle_wrap(ang: float) -> float:
    """
    Wrap angle to [-pi, +pi).
    """
    return (ang + np.pi) % TAU - np.pi


def angle_wrap_2pi(ang: float) -> float:
    """
    Wrap angle to [0, 2pi).
    """
    return ang % TAU


# ============================================================
# 2D vectors (world frame: x right, y up, angles CCW from +x)
# ============================================================

def unit_vector(angle_rad: float) -> np.ndarray:
    """
    Unit vector pointing along angle_rad.
    """
    return np.array([np.cos(angle_rad), np.sin(angle_rad)], dtype=float)


def cross2(a: np.ndarray, b: np.ndarray) -> float:
    """
    z component of a x b.

    Positive when b lies counter-clockwise of a (within half a turn),
    negative when clockwise, zero when collinear.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def angle_between(a: np.ndarray, b: np.ndarray) -> float:
    """
    Unsigned angle between two vectors, in [0, pi].

    Returns 0 if either vector has zero length.
    """
    na = float(np.linalg.norm(a))
    nb = float(np.linalg.norm(b))
    if na < 1e-12 or nb < 1e-12:
        return 0.0
    c = float(np.dot(a, b)) / (na * nb)
    return float(np.arccos(np.clip(c, -1.0, 1.0)))
