"""
Test Suite for ClassifierConfig.

Tests default resolution, immutability, and field validation of the
classifier configuration manifest.
"""

# Standard Imports
from unittest.mock import patch

# Third-Party Imports
import numpy as np
import pytest
import torch
import torch.nn as nn
from pydantic import ValidationError

# Internal Imports
from neuralclf.core.config import ClassifierConfig
from neuralclf.core.constants import MAX_SEED


# CLASSIFIER CONFIG: DEFAULTS
@pytest.mark.unit
def test_defaults_are_resolved(linear_net):
    """Unset collaborators are filled in at construction."""
    cfg = ClassifierConfig(model=linear_net)

    assert isinstance(cfg.optimizer, torch.optim.Adam)
    assert isinstance(cfg.loss, nn.CrossEntropyLoss)
    assert cfg.device == torch.device("cpu")
    assert isinstance(cfg.random_seed, int)
    assert 0 <= cfg.random_seed <= MAX_SEED


@pytest.mark.unit
def test_scalar_defaults(linear_net):
    """Scalar hyperparameters carry their documented defaults."""
    cfg = ClassifierConfig(model=linear_net)

    assert cfg.batch_size == 128
    assert cfg.max_epoch == 10
    assert cfg.shuffle is True
    assert cfg.validation_split == pytest.approx(0.1)
    assert cfg.verbose is True
    assert cfg.progress_bar is False


@pytest.mark.unit
def test_default_optimizer_bound_to_model_parameters(linear_net):
    """Default Adam optimizes exactly the model's parameters."""
    cfg = ClassifierConfig(model=linear_net)

    optimized = [p for group in cfg.optimizer.param_groups for p in group["params"]]
    assert {id(p) for p in optimized} == {id(p) for p in linear_net.parameters()}


@pytest.mark.unit
def test_none_values_are_treated_as_unset(linear_net):
    """Explicit None behaves like an omitted argument."""
    cfg = ClassifierConfig(model=linear_net, device=None, optimizer=None, loss=None, random_seed=None)

    assert isinstance(cfg.optimizer, torch.optim.Adam)
    assert isinstance(cfg.loss, nn.CrossEntropyLoss)
    assert cfg.random_seed is not None


@pytest.mark.unit
def test_explicit_collaborators_are_kept_by_reference(linear_net):
    """Caller-supplied objects are shared, not copied."""
    optimizer = torch.optim.SGD(linear_net.parameters(), lr=0.1)
    loss = nn.NLLLoss()

    cfg = ClassifierConfig(model=linear_net, optimizer=optimizer, loss=loss, random_seed=7)

    assert cfg.model is linear_net
    assert cfg.optimizer is optimizer
    assert cfg.loss is loss
    assert cfg.random_seed == 7


@pytest.mark.unit
def test_seed_draw_leaves_global_rng_untouched(linear_net):
    """Drawing a default seed does not reseed NumPy's global generator."""
    state_before = np.random.get_state()[1].copy()

    ClassifierConfig(model=linear_net)

    np.testing.assert_array_equal(np.random.get_state()[1], state_before)


@pytest.mark.unit
def test_device_string_is_converted(linear_net):
    """Device strings become torch.device instances."""
    cfg = ClassifierConfig(model=linear_net, device="cpu")

    assert isinstance(cfg.device, torch.device)
    assert cfg.device.type == "cpu"


@pytest.mark.unit
def test_auto_device_uses_best_available(linear_net):
    """'auto' resolves through accelerator detection."""
    with patch("neuralclf.core.environment.hardware.detect_best_device", return_value="cpu"):
        cfg = ClassifierConfig(model=linear_net, device="auto")

    assert cfg.device == torch.device("cpu")


# CLASSIFIER CONFIG: VALIDATION
@pytest.mark.unit
def test_missing_model_rejected():
    """A model is mandatory."""
    with pytest.raises(ValidationError):
        ClassifierConfig()


@pytest.mark.unit
def test_non_module_model_rejected():
    """Only torch.nn.Module instances are accepted as model."""
    with pytest.raises(ValidationError):
        ClassifierConfig(model="not a network")


@pytest.mark.unit
def test_parameter_free_model_without_optimizer_rejected():
    """The default Adam optimizer cannot be built for a model with no parameters."""
    with pytest.raises(ValidationError, match="empty parameter list"):
        ClassifierConfig(model=nn.ReLU())


@pytest.mark.unit
def test_parameter_free_model_with_explicit_optimizer_accepted():
    """An explicit optimizer bypasses the default factory."""
    optimizer = torch.optim.SGD([torch.zeros(1, requires_grad=True)], lr=0.1)

    cfg = ClassifierConfig(model=nn.ReLU(), optimizer=optimizer)

    assert cfg.optimizer is optimizer
    assert cfg.device == torch.device("cpu")


@pytest.mark.unit
@pytest.mark.parametrize("fraction", [0.0, 1.0, -0.2, 1.5])
def test_validation_split_bounds(linear_net, fraction):
    """validation_split must lie strictly between 0 and 1."""
    with pytest.raises(ValidationError):
        ClassifierConfig(model=linear_net, validation_split=fraction)


@pytest.mark.unit
@pytest.mark.parametrize("field", ["batch_size", "max_epoch"])
def test_counts_must_be_positive(linear_net, field):
    """batch_size and max_epoch reject zero."""
    with pytest.raises(ValidationError):
        ClassifierConfig(model=linear_net, **{field: 0})


@pytest.mark.unit
def test_negative_seed_rejected(linear_net):
    """Seeds must be non-negative."""
    with pytest.raises(ValidationError):
        ClassifierConfig(model=linear_net, random_seed=-1)


@pytest.mark.unit
def test_extra_fields_forbidden(linear_net):
    """Unknown fields are rejected."""
    with pytest.raises(ValidationError):
        ClassifierConfig(model=linear_net, learning_rate=0.1)


# CLASSIFIER CONFIG: IMMUTABILITY
@pytest.mark.unit
def test_config_is_frozen(linear_net):
    """Fields cannot be reassigned after construction."""
    cfg = ClassifierConfig(model=linear_net)

    with pytest.raises(ValidationError):
        cfg.batch_size = 4
