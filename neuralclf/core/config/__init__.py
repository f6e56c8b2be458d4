"""
Configuration Package Initialization.

Flat public API for the configuration schema and its semantic types.

Example:
    >>> from neuralclf.core.config import ClassifierConfig
    >>> cfg = ClassifierConfig(model=net, batch_size=32)
    >>> cfg.optimizer  # Adam bound to net.parameters()
"""

from .classifier_config import ClassifierConfig
from .types import BatchSize, EpochCount, Seed, SplitFraction

__all__ = [
    "ClassifierConfig",
    "BatchSize",
    "EpochCount",
    "Seed",
    "SplitFraction",
]
