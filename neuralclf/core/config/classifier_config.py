"""
Classifier Manifest.

Declarative, immutable schema holding every knob of a
``NeuralNetClassifier``. Collaborators that the caller leaves unset are
resolved exactly once, at construction:

    * device: the device hosting the model's parameters (CPU if none)
    * optimizer: ``torch.optim.Adam`` bound to ``model.parameters()``
    * loss: ``torch.nn.CrossEntropyLoss``
    * random_seed: drawn from OS entropy, without touching global RNG state

The resolved record is frozen; the model, optimizer and loss objects are held
by reference and shared with the caller.
"""

from __future__ import annotations

from typing import Any, Callable

import torch
import torch.nn as nn
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..environment import draw_seed, resolve_device, to_device_obj
from .types import BatchSize, EpochCount, Seed, SplitFraction


# CLASSIFIER CONFIGURATION
class ClassifierConfig(BaseModel):
    """
    Resolved configuration of a neural network classifier.

    Attributes:
        model: User-defined network trained in place.
        device: Target device for every batch transfer.
        optimizer: Optimizer updating ``model`` parameters.
        loss: Callable mapping ``(output, target)`` to a scalar loss tensor.
        batch_size: Number of samples per mini-batch.
        max_epoch: Number of passes over the training partition.
        shuffle: Reshuffle the training partition at every epoch.
        validation_split: Fraction of samples held out for validation.
        verbose: Report train/validation loss and accuracy after each epoch.
        random_seed: Seed for the data split and batch shuffling.
        progress_bar: Show a tqdm progress bar over training batches.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    model: nn.Module
    device: torch.device
    optimizer: torch.optim.Optimizer
    loss: Callable[..., Any]

    batch_size: BatchSize = Field(default=128, description="Samples per mini-batch")
    max_epoch: EpochCount = Field(default=10, description="Number of training epochs")
    shuffle: bool = Field(default=True, description="Reshuffle training data every epoch")
    validation_split: SplitFraction = Field(
        default=0.1, description="Fraction of samples held out for validation"
    )
    verbose: bool = Field(default=True, description="Report per-epoch metrics")
    random_seed: Seed
    progress_bar: bool = Field(default=False, description="Show tqdm bar over training batches")

    @model_validator(mode="before")
    @classmethod
    def resolve_defaults(cls, data: Any) -> Any:
        """
        Substitutes defaults for collaborators left unset (or set to None).

        Model-dependent defaults (device, optimizer) are only resolved when a
        valid ``nn.Module`` is present; otherwise field validation reports the
        missing or invalid model.

        Args:
            data: Raw constructor keyword arguments.

        Returns:
            Keyword arguments with every default filled in.
        """
        if not isinstance(data, dict):
            return data

        # Deferred: the trainer package imports this module through ..core
        from ...trainer.setup import get_criterion, get_optimizer

        resolved = {key: value for key, value in data.items() if value is not None}
        model = resolved.get("model")

        if isinstance(model, nn.Module):
            resolved.setdefault("device", resolve_device(None, model))
            if "optimizer" not in resolved:
                resolved["optimizer"] = get_optimizer(model)

        if "loss" not in resolved:
            resolved["loss"] = get_criterion()
        if "random_seed" not in resolved:
            resolved["random_seed"] = draw_seed()

        return resolved

    @field_validator("device", mode="before")
    @classmethod
    def parse_device(cls, v: Any) -> Any:
        """
        Converts device strings (including ``"auto"``) to ``torch.device``.

        Args:
            v: Device specification.

        Returns:
            ``torch.device`` for strings, the input untouched otherwise.
        """
        if isinstance(v, str):
            return to_device_obj(v)
        return v
