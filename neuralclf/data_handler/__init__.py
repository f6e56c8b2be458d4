"""
Data Handler Package.

Label encoding, stratified train/validation splitting, and tensor
DataLoader construction for in-memory datasets.
"""

from .loader import build_tensor_loader, to_feature_tensor
from .splitter import SplitData, fit_label_encoder, split_dataset

__all__ = [
    "SplitData",
    "fit_label_encoder",
    "split_dataset",
    "build_tensor_loader",
    "to_feature_tensor",
]
