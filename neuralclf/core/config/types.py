"""
Semantic type Definitions & Validation Primitives.

Annotated pydantic types enforcing the numeric boundaries of the classifier
hyperparameters, so invalid values are rejected when the configuration is
built rather than half-way through ``fit``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ..constants import MAX_SEED

# TRAINING
BatchSize = Annotated[int, Field(ge=1)]
EpochCount = Annotated[int, Field(ge=1)]

# DATA SPLITTING
SplitFraction = Annotated[float, Field(gt=0.0, lt=1.0)]

# REPRODUCIBILITY
Seed = Annotated[int, Field(ge=0, le=MAX_SEED)]
