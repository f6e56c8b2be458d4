"""
Reproducibility Environment.

Seeds are explicit values carried by the classifier configuration. Nothing in
this module touches the global PRNG state of Python, NumPy or PyTorch: an
unset seed is drawn once from a fresh, OS-entropy seeded NumPy generator, and
every seeded operation of a ``fit`` call (data split, batch shuffling) derives
from that stored value.
"""

import numpy as np
import torch

from ..constants import MAX_SEED


def draw_seed() -> int:
    """Draw a fresh seed from OS entropy without mutating global RNG state.

    Returns:
        Integer seed in ``[0, 2**32 - 1]``.
    """
    return int(np.random.default_rng().integers(0, MAX_SEED, endpoint=True))


def make_generator(seed: int) -> torch.Generator:
    """Build a private torch Generator for DataLoader shuffling.

    Args:
        seed: Seed for the generator.

    Returns:
        CPU ``torch.Generator`` seeded with ``seed``.
    """
    generator = torch.Generator()
    generator.manual_seed(seed)
    return generator
