"""
Random seed management for reproducibility.
"""

from __future__ import annotations

import random
import numpy as np


def set_seed(seed: int) -> None:
    """
    Set random seeds for reproducibility.

    Sets seeds for:
    - Python random (computer name selection)
    - NumPy (random opponents and random test boards)

    Args:
        seed: Random seed value
    """
    random.seed(seed)
    np.random.seed(seed)
