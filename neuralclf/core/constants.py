"""
Project-wide Constants.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules for log synchronization.
    METRIC_*: Keys of the per-epoch history records produced during ``fit``.
    MAX_SEED: Upper bound accepted by NumPy/scikit-learn ``random_state`` seeds.
"""

from typing import Final

# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "NeuralClf"

# History record keys
METRIC_EPOCH: Final[str] = "epoch"
METRIC_TRAIN_LOSS: Final[str] = "train_loss"
METRIC_LOSS: Final[str] = "loss"
METRIC_ACCURACY: Final[str] = "accuracy"
METRIC_VAL_LOSS: Final[str] = "val_loss"
METRIC_VAL_ACCURACY: Final[str] = "val_accuracy"

MAX_SEED: Final[int] = 2**32 - 1
