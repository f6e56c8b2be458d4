"""
Neural Network Classifier Estimator.

Adapts a user-defined PyTorch network into a scikit-learn compatible
classifier. The estimator owns the orchestration only: label encoding,
stratified train/validation split, the batched epoch loop and inference.
Tensor math, backpropagation and parameter updates are performed by PyTorch
on the caller's model, which is trained in place and shared by reference.

Example:
    >>> import torch.nn as nn
    >>> from neuralclf import NeuralNetClassifier
    >>> net = nn.Sequential(nn.Linear(2, 8), nn.ReLU(), nn.Linear(8, 2))
    >>> clf = NeuralNetClassifier(model=net, batch_size=50, max_epoch=10)
    >>> clf.fit(x, y).predict(x)
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable

import numpy as np
import torch
import torch.nn as nn
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.utils.validation import check_consistent_length, column_or_1d

from .core import LOGGER_NAME, ClassifierConfig, log_fit_summary
from .data_handler import build_tensor_loader, fit_label_encoder, split_dataset, to_feature_tensor
from .exceptions import NeuralClfConfigError, NeuralClfNotFittedError
from .trainer import ModelTrainer

logger = logging.getLogger(LOGGER_NAME)


class NeuralNetClassifier(ClassifierMixin, BaseEstimator):
    """
    Classifier backed by a user-defined ``torch.nn.Module``.

    The configuration is resolved once at construction (see
    ``ClassifierConfig``) and is read-only afterwards; every hyperparameter is
    exposed as a property so ``get_params`` reports resolved values.

    Attributes:
        config (ClassifierConfig): Resolved, frozen configuration.
        classes_ (np.ndarray): Sorted distinct labels seen during ``fit``.
            Index ``i`` is the class id ``i`` used internally.
        history_ (list[dict[str, float]]): Per-epoch training records.
        n_features_in_ (int): Feature count, set when ``fit`` receives 2-D input.
    """

    def __init__(
        self,
        model: nn.Module | None = None,
        device: str | torch.device | None = None,
        optimizer: torch.optim.Optimizer | None = None,
        loss: Callable[..., Any] | None = None,
        batch_size: int = 128,
        max_epoch: int = 10,
        shuffle: bool = True,
        validation_split: float = 0.1,
        verbose: bool = True,
        random_seed: int | None = None,
        progress_bar: bool = False,
    ) -> None:
        if model is None:
            raise NeuralClfConfigError(
                "A model is required: pass the torch.nn.Module to train as `model`."
            )
        self.config = ClassifierConfig(
            model=model,
            device=device,
            optimizer=optimizer,
            loss=loss,
            batch_size=batch_size,
            max_epoch=max_epoch,
            shuffle=shuffle,
            validation_split=validation_split,
            verbose=verbose,
            random_seed=random_seed,
            progress_bar=progress_bar,
        )

    # ── Read-only hyperparameters ─────────────────────────────────────────

    @property
    def model(self) -> nn.Module:
        return self.config.model

    @property
    def device(self) -> torch.device:
        return self.config.device

    @property
    def optimizer(self) -> torch.optim.Optimizer:
        return self.config.optimizer

    @property
    def loss(self) -> Callable[..., Any]:
        return self.config.loss

    @property
    def batch_size(self) -> int:
        return self.config.batch_size

    @property
    def max_epoch(self) -> int:
        return self.config.max_epoch

    @property
    def shuffle(self) -> bool:
        return self.config.shuffle

    @property
    def validation_split(self) -> float:
        return self.config.validation_split

    @property
    def verbose(self) -> bool:
        return self.config.verbose

    @property
    def random_seed(self) -> int:
        return self.config.random_seed

    @property
    def progress_bar(self) -> bool:
        return self.config.progress_bar

    @property
    def classes(self) -> np.ndarray:
        """Class table learned by ``fit``."""
        self._check_fitted()
        return self.classes_

    def set_params(self, **params: Any) -> NeuralNetClassifier:
        """
        Rejected: the configuration is frozen after construction.

        Raises:
            NeuralClfConfigError: Always; build a new classifier instead.
        """
        raise NeuralClfConfigError(
            f"{self.__class__.__name__} configuration is immutable; "
            f"cannot set {sorted(params)}. Construct a new classifier instead."
        )

    def __sklearn_clone__(self) -> NeuralNetClassifier:
        """
        Unfitted copy with the same configuration, used by ``sklearn.base.clone``.

        Model, optimizer and loss are deep-copied together so the copied
        optimizer updates the copied model's parameters rather than
        detached duplicates. The copy starts from the current weights.
        """
        cfg = self.config
        model, optimizer, loss = copy.deepcopy((cfg.model, cfg.optimizer, cfg.loss))
        return self.__class__(
            model=model,
            device=cfg.device,
            optimizer=optimizer,
            loss=loss,
            batch_size=cfg.batch_size,
            max_epoch=cfg.max_epoch,
            shuffle=cfg.shuffle,
            validation_split=cfg.validation_split,
            verbose=cfg.verbose,
            random_seed=cfg.random_seed,
            progress_bar=cfg.progress_bar,
        )

    # ── Estimator API ─────────────────────────────────────────────────────

    def fit(self, x: Any, y: Any) -> NeuralNetClassifier:
        """
        Fit the model with given training data.

        Args:
            x: Training samples, shape ``(n_samples, n_features)`` (any
                trailing shape the model accepts).
            y: Labels, shape ``(n_samples,)``, of any hashable and mutually
                comparable type.

        Returns:
            The fitted classifier itself.

        Raises:
            ValueError: On length mismatch or infeasible stratified split.
            RuntimeError: On any PyTorch failure during training.
        """
        cfg = self.config
        x = np.asarray(x)
        y = column_or_1d(y, warn=True)
        check_consistent_length(x, y)

        encoder = fit_label_encoder(y)
        split = split_dataset(x, y, cfg.validation_split, cfg.random_seed)

        train_loader = build_tensor_loader(
            split.x_train,
            encoder.transform(split.y_train),
            batch_size=cfg.batch_size,
            shuffle=cfg.shuffle,
            seed=cfg.random_seed,
        )
        val_loader = build_tensor_loader(
            split.x_val,
            encoder.transform(split.y_val),
            batch_size=cfg.batch_size,
            shuffle=False,
        )

        log_fit_summary(
            cfg,
            n_train=len(split.y_train),
            n_val=len(split.y_val),
            n_classes=len(encoder.classes_),
            logger_instance=logger,
        )

        self.history_ = ModelTrainer(cfg, train_loader, val_loader).fit()

        # Published only once training completed, so a failed fit stays unfitted
        self.classes_ = encoder.classes_
        if x.ndim == 2:
            self.n_features_in_ = x.shape[1]
        return self

    def predict(self, x: Any) -> np.ndarray:
        """
        Predict class labels for samples.

        Args:
            x: Samples, shape ``(n_samples, n_features)``.

        Returns:
            Array of shape ``(n_samples,)`` holding values from ``classes_``.
            Ties resolve to the lowest class index.

        Raises:
            NeuralClfNotFittedError: If ``fit`` has not been called.
        """
        outputs = self._forward(x)
        indices = outputs.argmax(dim=1).numpy()
        return self.classes_[indices]

    def decision_function(self, x: Any) -> np.ndarray:
        """
        Calculate raw per-class model outputs for samples.

        Values are whatever the network emits (logits unless the network
        applies its own normalization).

        Args:
            x: Samples, shape ``(n_samples, n_features)``.

        Returns:
            Float64 array of shape ``(n_samples, n_classes)``.

        Raises:
            NeuralClfNotFittedError: If ``fit`` has not been called.
        """
        return self._forward(x).numpy().astype(np.float64)

    # ── Internal helpers ──────────────────────────────────────────────────

    def __sklearn_is_fitted__(self) -> bool:
        return hasattr(self, "classes_")

    def _check_fitted(self) -> None:
        if not self.__sklearn_is_fitted__():
            raise NeuralClfNotFittedError(
                f"This {self.__class__.__name__} instance is not fitted yet. "
                "Call 'fit' with appropriate arguments before using this estimator."
            )

    def _forward(self, x: Any) -> torch.Tensor:
        """Run the model in evaluation mode without gradient tracking; returns CPU output."""
        self._check_fitted()
        cfg = self.config
        inputs = to_feature_tensor(x).to(cfg.device)
        cfg.model.eval()
        with torch.no_grad():
            outputs = cfg.model(inputs)
        return outputs.cpu()
