"""
neuralclf Exception Hierarchy.

NeuralClfError (base, Exception)
├── NeuralClfConfigError(NeuralClfError, ValueError)          ← classifier construction
└── NeuralClfNotFittedError(NeuralClfError, NotFittedError)   ← inference before fit

NeuralClfNotFittedError multi-inherits from scikit-learn's NotFittedError so
that ``except NotFittedError`` blocks written against sklearn estimators keep
working.
"""

from sklearn.exceptions import NotFittedError


class NeuralClfError(Exception):
    """Base exception for all neuralclf errors."""


class NeuralClfConfigError(NeuralClfError, ValueError):
    """Configuration error (backward-compatible with ValueError)."""


class NeuralClfNotFittedError(NeuralClfError, NotFittedError):
    """Inference requested on a classifier that has no class table yet."""
