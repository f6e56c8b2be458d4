"""
Optimization Setup Module.

Factory functions for the default optimization components used when the
caller does not supply their own.
"""

from __future__ import annotations

import torch.nn as nn
import torch.optim as optim


def get_criterion() -> nn.Module:
    """
    Default classification criterion.

    Returns:
        ``nn.CrossEntropyLoss`` expecting raw logits and int64 class ids.
    """
    return nn.CrossEntropyLoss()


def get_optimizer(model: nn.Module) -> optim.Optimizer:
    """
    Default optimizer bound to the model's parameters.

    Args:
        model: Network whose parameters will be optimised.

    Returns:
        ``optim.Adam`` with PyTorch's default hyperparameters.

    Raises:
        ValueError: If the model exposes no parameters. When the default is
            resolved through ``ClassifierConfig`` (and so ``NeuralNetClassifier``),
            pydantic reports it as a ``pydantic.ValidationError``, which is
            itself a ``ValueError`` subclass.
    """
    return optim.Adam(model.parameters())
