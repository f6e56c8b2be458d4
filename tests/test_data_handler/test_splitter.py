"""
Test Suite for Label Encoding and Stratified Splitting.
"""

import numpy as np
import pytest

from neuralclf.data_handler import SplitData, fit_label_encoder, split_dataset


# FIXTURES
@pytest.fixture
def imbalanced():
    """100 samples with an 80:20 class ratio."""
    x = np.arange(200, dtype=np.float64).reshape(100, 2)
    y = np.array(["major"] * 80 + ["minor"] * 20)
    return x, y


# TESTS: fit_label_encoder
@pytest.mark.unit
def test_label_encoder_canonical_order():
    """Classes come out sorted and deduplicated."""
    encoder = fit_label_encoder(np.array(["b", "a", "c", "a", "b"]))

    assert list(encoder.classes_) == ["a", "b", "c"]


@pytest.mark.unit
def test_label_encoder_ids_index_class_table():
    """Transformed ids index back into the class table."""
    y = np.array([30, 10, 20, 10])
    encoder = fit_label_encoder(y)

    ids = encoder.transform(y)

    np.testing.assert_array_equal(ids, [2, 0, 1, 0])
    np.testing.assert_array_equal(encoder.classes_[ids], y)


# TESTS: split_dataset
@pytest.mark.unit
def test_split_partitions_are_disjoint_and_complete(imbalanced):
    """Every sample lands in exactly one partition."""
    x, y = imbalanced

    split = split_dataset(x, y, validation_split=0.1, random_seed=0)

    assert isinstance(split, SplitData)
    assert len(split.x_train) + len(split.x_val) == len(x)
    assert len(split.x_train) == len(split.y_train)
    assert len(split.x_val) == len(split.y_val)
    seen = {tuple(row) for row in split.x_train} | {tuple(row) for row in split.x_val}
    assert len(seen) == len(x)


@pytest.mark.unit
def test_split_is_stratified(imbalanced):
    """Validation class ratio stays within one sample of 80:20."""
    x, y = imbalanced

    split = split_dataset(x, y, validation_split=0.1, random_seed=3)

    n_val = len(split.y_val)
    n_major = int(np.sum(split.y_val == "major"))
    assert abs(n_major - 0.8 * n_val) <= 1
    assert abs((n_val - n_major) - 0.2 * n_val) <= 1


@pytest.mark.unit
def test_split_is_deterministic_for_fixed_seed(imbalanced):
    """The same seed yields the same validation membership."""
    x, y = imbalanced

    first = split_dataset(x, y, validation_split=0.2, random_seed=42)
    second = split_dataset(x, y, validation_split=0.2, random_seed=42)

    np.testing.assert_array_equal(first.x_val, second.x_val)
    np.testing.assert_array_equal(first.y_val, second.y_val)


@pytest.mark.unit
def test_split_depends_on_seed(imbalanced):
    """Different seeds shuffle membership differently."""
    x, y = imbalanced

    first = split_dataset(x, y, validation_split=0.2, random_seed=1)
    second = split_dataset(x, y, validation_split=0.2, random_seed=2)

    assert not np.array_equal(first.x_val, second.x_val)


@pytest.mark.unit
def test_split_infeasible_stratification_raises():
    """A class with a single member cannot be stratified."""
    x = np.zeros((20, 2))
    y = np.array([0] * 19 + [1])

    with pytest.raises(ValueError):
        split_dataset(x, y, validation_split=0.1, random_seed=0)
