"""
Training Progress Logging.

Formatted logging utilities for the fit lifecycle: a debug-level summary of
the resolved configuration and the per-epoch metrics report. Messages carry
no prefix of their own; timestamp and level come from the handler format
installed by ``Logger``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..constants import (
    LOGGER_NAME,
    METRIC_ACCURACY,
    METRIC_LOSS,
    METRIC_VAL_ACCURACY,
    METRIC_VAL_LOSS,
)
from .styles import LogStyle

if TYPE_CHECKING:  # pragma: no cover
    from ..config import ClassifierConfig

logger = logging.getLogger(LOGGER_NAME)


def format_epoch_metrics(metrics: dict[str, float]) -> str:
    """
    Render train/validation metrics as a single report line.

    Args:
        metrics: Mapping holding ``loss``, ``accuracy``, ``val_loss`` and
            ``val_accuracy``.

    Returns:
        ``"loss: x - accuracy: x - val_loss: x - val_accuracy: x"`` with four
        decimals per value.
    """
    return (
        f"loss: {metrics[METRIC_LOSS]:.4f} - "
        f"accuracy: {metrics[METRIC_ACCURACY]:.4f} - "
        f"val_loss: {metrics[METRIC_VAL_LOSS]:.4f} - "
        f"val_accuracy: {metrics[METRIC_VAL_ACCURACY]:.4f}"
    )


def log_epoch_metrics(
    epoch: int,
    max_epoch: int,
    metrics: dict[str, float],
    logger_instance: logging.Logger | None = None,
) -> None:
    """
    Log the per-epoch report: an epoch counter line followed by the metrics line.

    Both lines are separate INFO records. Handlers configured by ``Logger``
    render each with its format, so console and file output read
    ``<asctime> - INFO - Epoch: 2/5`` and ``<asctime> - INFO - loss: ...``.
    Pass a differently formatted ``logger_instance`` for bare lines.

    Args:
        epoch: Current epoch (1-indexed).
        max_epoch: Total number of epochs.
        metrics: Train/validation loss and accuracy for the epoch.
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger
    log.info(f"Epoch: {epoch}/{max_epoch}")
    log.info(format_epoch_metrics(metrics))


def log_fit_summary(
    cfg: "ClassifierConfig",
    n_train: int,
    n_val: int,
    n_classes: int,
    logger_instance: logging.Logger | None = None,
) -> None:
    """
    Log the resolved fit setup at DEBUG level.

    Args:
        cfg: Resolved classifier configuration.
        n_train: Number of training samples.
        n_val: Number of validation samples.
        n_classes: Number of distinct classes.
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger
    log.debug(LogStyle.LIGHT)
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Model      : {cfg.model.__class__.__name__}")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Device     : {cfg.device}")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Optimizer  : {cfg.optimizer.__class__.__name__}")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Loss       : {cfg.loss.__class__.__name__}")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Epochs     : {cfg.max_epoch}")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Batch Size : {cfg.batch_size}")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Samples    : {n_train} train / {n_val} val")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Classes    : {n_classes}")
    log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} Seed       : {cfg.random_seed}")
    log.debug(LogStyle.LIGHT)
