"""
Model Training Orchestration.

This module encapsulates the ``ModelTrainer`` engine, which runs the epoch
loop of a classifier fit: one training pass per epoch, optionally followed by
a read-only evaluation of the training and validation partitions for
reporting.

Evaluation is observability only: it never updates parameters or optimizer
state. The training partition is read through a separate unshuffled
loader, so the seeded shuffling generator advances only during training
passes and enabling or disabling evaluation leaves the weights unchanged.
"""

from __future__ import annotations

import logging

from torch.utils.data import DataLoader

from ..core import (
    LOGGER_NAME,
    METRIC_ACCURACY,
    METRIC_EPOCH,
    METRIC_LOSS,
    METRIC_TRAIN_LOSS,
    METRIC_VAL_ACCURACY,
    METRIC_VAL_LOSS,
    ClassifierConfig,
    log_epoch_metrics,
)
from .engine import evaluate_epoch, train_one_epoch

# Global logger instance
logger = logging.getLogger(LOGGER_NAME)


# TRAINING LOGIC
class ModelTrainer:
    """
    Runs the epoch loop over a training and a validation DataLoader.

    The model, optimizer, criterion and device come from the resolved
    ``ClassifierConfig``; the model is updated in place.

    Attributes:
        cfg (ClassifierConfig): Resolved classifier configuration.
        train_loader (DataLoader): Training data provider.
        val_loader (DataLoader): Validation data provider.
        train_eval_loader (DataLoader): Unshuffled view of the training
            dataset used for verbose evaluation.
        history (list[dict[str, float]]): One record per completed epoch.

    Example:
        >>> trainer = ModelTrainer(cfg, train_loader, val_loader)
        >>> history = trainer.fit()
    """

    def __init__(
        self,
        cfg: ClassifierConfig,
        train_loader: DataLoader,
        val_loader: DataLoader,
    ) -> None:
        self.cfg = cfg
        self.train_loader = train_loader
        self.val_loader = val_loader
        # Shuffling draws from the seeded generator; evaluation must not consume it
        self.train_eval_loader = DataLoader(
            train_loader.dataset, batch_size=train_loader.batch_size, shuffle=False
        )
        self.history: list[dict[str, float]] = []

    def fit(self) -> list[dict[str, float]]:
        """
        Executes ``cfg.max_epoch`` epochs.

        Returns:
            Per-epoch history. Every record holds ``epoch`` and
            ``train_loss``; verbose runs add ``loss``, ``accuracy``,
            ``val_loss`` and ``val_accuracy``.
        """
        for epoch in range(1, self.cfg.max_epoch + 1):
            record = self.run_epoch(epoch)
            self.history.append(record)
        return self.history

    def run_epoch(self, epoch: int) -> dict[str, float]:
        """
        Executes one training pass, then reports metrics when verbose.

        Args:
            epoch: Current epoch number (1-indexed).

        Returns:
            History record for the epoch.
        """
        cfg = self.cfg
        train_loss = train_one_epoch(
            model=cfg.model,
            loader=self.train_loader,
            criterion=cfg.loss,
            optimizer=cfg.optimizer,
            device=cfg.device,
            epoch=epoch,
            total_epochs=cfg.max_epoch,
            use_tqdm=cfg.progress_bar,
        )
        record: dict[str, float] = {METRIC_EPOCH: epoch, METRIC_TRAIN_LOSS: train_loss}

        if not cfg.verbose:
            return record

        metrics = self.evaluate()
        record.update(metrics)
        log_epoch_metrics(epoch, cfg.max_epoch, metrics, logger_instance=logger)
        return record

    def evaluate(self) -> dict[str, float]:
        """
        Evaluates both partitions with the current weights.

        Returns:
            Mapping with ``loss``, ``accuracy``, ``val_loss``, ``val_accuracy``.
        """
        cfg = self.cfg
        loss, accuracy = evaluate_epoch(cfg.model, self.train_eval_loader, cfg.loss, cfg.device)
        val_loss, val_accuracy = evaluate_epoch(cfg.model, self.val_loader, cfg.loss, cfg.device)
        return {
            METRIC_LOSS: loss,
            METRIC_ACCURACY: accuracy,
            METRIC_VAL_LOSS: val_loss,
            METRIC_VAL_ACCURACY: val_accuracy,
        }
