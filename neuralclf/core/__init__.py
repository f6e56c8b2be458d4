"""
Core Utilities Package

Exposes the essential components for configuration, logging, device
resolution, seeding and project constants.
"""

# Constants
from .constants import (
    LOGGER_NAME,
    METRIC_ACCURACY,
    METRIC_EPOCH,
    METRIC_LOSS,
    METRIC_TRAIN_LOSS,
    METRIC_VAL_ACCURACY,
    METRIC_VAL_LOSS,
)

# Environment & Hardware
from .environment import (
    detect_best_device,
    draw_seed,
    make_generator,
    resolve_device,
    to_device_obj,
)

# Configuration
from .config import ClassifierConfig

# Logging
from .logger import Logger, LogStyle, log_epoch_metrics, log_fit_summary

__all__ = [
    # Constants
    "LOGGER_NAME",
    "METRIC_EPOCH",
    "METRIC_TRAIN_LOSS",
    "METRIC_LOSS",
    "METRIC_ACCURACY",
    "METRIC_VAL_LOSS",
    "METRIC_VAL_ACCURACY",
    # Environment
    "detect_best_device",
    "to_device_obj",
    "resolve_device",
    "draw_seed",
    "make_generator",
    # Configuration
    "ClassifierConfig",
    # Logging
    "Logger",
    "LogStyle",
    "log_epoch_metrics",
    "log_fit_summary",
]
