# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 08:02:10 2026

@author: bboyg
"""

import numpy as np


def new_rng(tick: int, seed: int = 0) -> np.random.Generator:
    """
    Fresh generator for one simulation tick.

    Same (seed, tick) pair -> same stream, so a replayed run reproduces
    every noisy radar estimate.
    """
    return np.random.default_rng([int(seed), int(tick)])
