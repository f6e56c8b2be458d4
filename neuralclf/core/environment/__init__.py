"""
Environment & Hardware Abstraction Layer.

Centralizes compute device discovery and the explicit seeding protocol used
to keep data splitting and batch shuffling reproducible.
"""

# 1. Hardware & Device Management (from .hardware)
from .hardware import detect_best_device, resolve_device, to_device_obj

# 2. Determinism & Seeding (from .reproducibility)
from .reproducibility import draw_seed, make_generator

__all__ = [
    # Hardware
    "detect_best_device",
    "to_device_obj",
    "resolve_device",
    # Reproducibility
    "draw_seed",
    "make_generator",
]
