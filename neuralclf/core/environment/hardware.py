"""
Hardware Acceleration & Device Resolution.

Translates user-facing device specifications (strings, ``torch.device``
objects or nothing at all) into concrete ``torch.device`` instances.

No fallback is applied when an explicitly requested accelerator is missing:
the transfer of the first batch fails and the error reaches the caller.
"""

from __future__ import annotations

import torch
import torch.nn as nn


def detect_best_device() -> str:
    """
    Detects the most capable accelerator available on the host.

    Returns:
        ``"cuda"``, ``"mps"`` or ``"cpu"`` in that order of preference.
    """
    if torch.cuda.is_available():
        return "cuda"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return "mps"
    return "cpu"


def to_device_obj(device: str | torch.device) -> torch.device:
    """
    Converts a device specification into a ``torch.device``.

    Args:
        device: ``torch.device`` instance, a torch device string
            (``"cpu"``, ``"cuda:1"``, ...) or ``"auto"``.

    Returns:
        Resolved ``torch.device``.
    """
    if isinstance(device, torch.device):
        return device
    if device.lower() == "auto":
        return torch.device(detect_best_device())
    return torch.device(device)


def resolve_device(device: str | torch.device | None, model: nn.Module) -> torch.device:
    """
    Resolves the compute device used for batch placement.

    When no device is given, the device already hosting the model's first
    parameter is used, so data is moved where the weights live. Parameter-free
    models default to CPU.

    Args:
        device: Explicit device specification, or None.
        model: Network whose parameters anchor the default.

    Returns:
        Resolved ``torch.device``.
    """
    if device is not None:
        return to_device_obj(device)

    first_param = next(model.parameters(), None)
    if first_param is None:
        return torch.device("cpu")
    return first_param.device
