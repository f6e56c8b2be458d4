"""
Tensor DataLoader Construction.

Wraps in-memory NumPy partitions into ``TensorDataset``/``DataLoader`` pairs
and converts inference inputs to tensors. Features are cast to ``float32`` and
class ids to ``int64``, the dtypes expected by ``nn.Linear`` and
``nn.CrossEntropyLoss``. Loading happens in the calling process
(``num_workers=0``).
"""

from __future__ import annotations

import numpy as np
import torch
from torch.utils.data import DataLoader, TensorDataset

from ..core import make_generator


def to_feature_tensor(x: np.ndarray) -> torch.Tensor:
    """
    Convert a feature array to a contiguous ``float32`` tensor.

    Args:
        x: Array-like of features, first axis indexes samples.

    Returns:
        CPU tensor sharing no memory with the caller's array.
    """
    return torch.from_numpy(np.array(x, dtype=np.float32))


def build_tensor_loader(
    x: np.ndarray,
    y: np.ndarray,
    batch_size: int,
    shuffle: bool,
    seed: int | None = None,
) -> DataLoader:
    """
    Build a DataLoader over paired (features, class ids).

    Args:
        x: Feature array of the partition.
        y: Integer class ids aligned with ``x``.
        batch_size: Samples per mini-batch (the last batch may be smaller).
        shuffle: Reshuffle sample order at every pass.
        seed: Seed of the private shuffling generator. Ignored when
            ``shuffle`` is False.

    Returns:
        DataLoader yielding ``(inputs, targets)`` tensor pairs.
    """
    dataset = TensorDataset(
        to_feature_tensor(x),
        torch.from_numpy(np.asarray(y, dtype=np.int64)),
    )
    generator = make_generator(seed) if shuffle and seed is not None else None
    return DataLoader(
        dataset,
        batch_size=batch_size,
        shuffle=shuffle,
        generator=generator,
        num_workers=0,
    )
