"""
Core Training and Evaluation Engines.

Stateless, single-epoch execution kernels consumed by ``ModelTrainer``.
Each function accepts fully-resolved objects (model, loader, criterion,
device) and returns plain Python values.

Key Functions:
    train_one_epoch: Single training pass with optional tqdm progress.
    evaluate_epoch: No-grad pass returning (mean loss, accuracy).
"""

from __future__ import annotations

import logging
from typing import Callable

import torch
import torch.nn as nn
from tqdm.auto import tqdm

from ..core import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


# TRAINING ENGINE
def train_one_epoch(
    model: nn.Module,
    loader: torch.utils.data.DataLoader,
    criterion: Callable[[torch.Tensor, torch.Tensor], torch.Tensor],
    optimizer: torch.optim.Optimizer,
    device: torch.device,
    epoch: int = 0,
    total_epochs: int = 1,
    use_tqdm: bool = False,
) -> float:
    """
    Performs a single full pass over the training dataset.

    Batches are processed strictly in loader order. Any error raised by the
    forward pass, the loss or the optimizer aborts the epoch.

    Args:
        model: Neural network architecture to train
        loader: Training data provider
        criterion: Loss function
        optimizer: Gradient descent optimizer
        device: Hardware target (CUDA/MPS/CPU)
        epoch: Current epoch index for progress bar
        total_epochs: Total number of epochs (for progress bar)
        use_tqdm: Show progress bar during training

    Returns:
        Sample-weighted average training loss for the epoch
    """
    model.train()
    running_loss = 0.0
    total_samples = 0

    if use_tqdm:
        iterator = tqdm(loader, desc=f"Train Epoch {epoch}/{total_epochs}", leave=False, ncols=100)
    else:
        iterator = loader

    for inputs, targets in iterator:
        inputs, targets = inputs.to(device), targets.to(device)
        optimizer.zero_grad()

        outputs = model(inputs)
        loss = criterion(outputs, targets)
        loss.backward()
        optimizer.step()

        batch_size = inputs.size(0)
        running_loss += loss.item() * batch_size
        total_samples += batch_size

        if use_tqdm:
            iterator.set_postfix({"loss": f"{loss.item():.4f}"})

    if total_samples == 0:
        logger.warning("Empty training set: no samples processed. Returning zero loss.")
        return 0.0

    return running_loss / total_samples


# EVALUATION ENGINE
def evaluate_epoch(
    model: nn.Module,
    loader: torch.utils.data.DataLoader,
    criterion: Callable[[torch.Tensor, torch.Tensor], torch.Tensor],
    device: torch.device,
) -> tuple[float, float]:
    """
    Measures loss and accuracy over every sample of a loader.

    Runs in evaluation mode under ``torch.no_grad()``; parameters and
    optimizer state are left untouched. The model stays in evaluation mode on
    return, ``train_one_epoch`` switches it back.

    The reported loss is the sum of per-batch mean losses divided by the
    number of samples in ``loader.dataset``; accuracy is the number of
    samples whose argmax output equals the target divided by that same count.

    Args:
        model: Neural network model to evaluate
        loader: Data provider exposing ``dataset``
        criterion: Loss function (e.g., CrossEntropyLoss)
        device: Hardware target (CUDA/MPS/CPU)

    Returns:
        Tuple of (mean loss per sample, accuracy fraction).
    """
    model.eval()
    total_loss = 0.0
    correct = 0

    with torch.no_grad():
        for inputs, targets in loader:
            inputs, targets = inputs.to(device), targets.to(device)

            outputs = model(inputs)
            total_loss += criterion(outputs, targets).item()

            predicted = outputs.argmax(dim=1)
            correct += (predicted == targets.view_as(predicted)).sum().item()

    n_samples = len(loader.dataset)
    if n_samples == 0:
        logger.warning("Empty evaluation set: no samples processed. Returning zero metrics.")
        return 0.0, 0.0

    return total_loss / n_samples, correct / n_samples
