"""
Label Encoding & Dataset Partitioning.

Thin adapters over scikit-learn's ``LabelEncoder`` and ``train_test_split``:

- ``fit_label_encoder`` builds the class table. Its canonical order is the
  sorted order of the distinct labels; index ``i`` of ``classes_`` is the
  integer class id ``i`` used during training.
- ``split_dataset`` carves a stratified validation partition out of the
  samples. Infeasible stratifications (e.g. a class with a single member)
  raise scikit-learn's ``ValueError`` unchanged; there is no fallback to an
  unstratified split.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np
from sklearn.model_selection import train_test_split
from sklearn.preprocessing import LabelEncoder

from ..core import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class SplitData(NamedTuple):
    """Train/validation partition of a labelled dataset."""

    x_train: np.ndarray
    x_val: np.ndarray
    y_train: np.ndarray
    y_val: np.ndarray


def fit_label_encoder(y: np.ndarray) -> LabelEncoder:
    """
    Fit a label encoder on the full label vector.

    Args:
        y: 1-D array of hashable, mutually comparable labels.

    Returns:
        Fitted ``LabelEncoder`` whose ``classes_`` is the class table.
    """
    encoder = LabelEncoder()
    encoder.fit(y)
    logger.debug(f"Label encoder fitted: {len(encoder.classes_)} classes")
    return encoder


def split_dataset(
    x: np.ndarray,
    y: np.ndarray,
    validation_split: float,
    random_seed: int,
) -> SplitData:
    """
    Stratified, seeded train/validation split.

    Args:
        x: Feature array, first axis indexes samples.
        y: Label array aligned with ``x``.
        validation_split: Fraction of samples assigned to validation.
        random_seed: Seed fixing split membership.

    Returns:
        SplitData with class proportions preserved in both partitions.

    Raises:
        ValueError: If stratification is infeasible for the requested fraction.
    """
    x_train, x_val, y_train, y_val = train_test_split(
        x,
        y,
        test_size=validation_split,
        stratify=y,
        random_state=random_seed,
    )
    return SplitData(x_train=x_train, x_val=x_val, y_train=y_train, y_val=y_val)
