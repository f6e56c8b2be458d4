"""
neuralclf: scikit-learn style classifiers for user-defined PyTorch networks.

Top-level convenience API re-exporting the most commonly used components
from subpackages, so users can write:

    from neuralclf import NeuralNetClassifier, ClassifierConfig, Logger
"""

from importlib.metadata import version as _pkg_version

__version__ = _pkg_version("neuralclf")

from .classifier import NeuralNetClassifier
from .core import LOGGER_NAME, ClassifierConfig, Logger
from .exceptions import NeuralClfConfigError, NeuralClfError, NeuralClfNotFittedError

__all__ = [
    "__version__",
    # Estimator
    "NeuralNetClassifier",
    # Core
    "ClassifierConfig",
    "Logger",
    "LOGGER_NAME",
    # Exceptions
    "NeuralClfError",
    "NeuralClfConfigError",
    "NeuralClfNotFittedError",
]
