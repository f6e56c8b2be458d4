"""
Trainer Package Facade.

Exposes the ``ModelTrainer`` epoch loop, the default optimization factories,
and the low-level single-epoch engines.
"""

from .engine import evaluate_epoch, train_one_epoch
from .setup import get_criterion, get_optimizer
from .trainer import ModelTrainer

__all__ = [
    "ModelTrainer",
    "train_one_epoch",
    "evaluate_epoch",
    "get_criterion",
    "get_optimizer",
]
