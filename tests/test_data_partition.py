import pandas as pd
import pytest

import constants
from data_partition import extract_X_y, make_partition, split_indices
from errors import ConfigurationError, DataFormatError


def test_split_is_reproducible(cohort):
    first = split_indices(cohort, seed=42)
    second = split_indices(cohort, seed=42)
    assert first[0].equals(second[0])
    assert first[1].equals(second[1])


def test_different_seeds_give_different_splits(cohort):
    train_a, _ = split_indices(cohort, seed=42)
    train_b, _ = split_indices(cohort, seed=123)
    assert set(train_a) != set(train_b)


def test_split_covers_cohort_without_overlap(cohort):
    train_idx, test_idx = split_indices(cohort)
    assert set(train_idx) | set(test_idx) == set(cohort.index)
    assert not set(train_idx) & set(test_idx)


def test_split_proportion(cohort):
    train_idx, test_idx = split_indices(cohort, train_size=0.7)
    assert len(cohort) == 490
    assert abs(len(train_idx) - 343) <= 1
    assert len(train_idx) + len(test_idx) == 490


def test_split_is_stratified(cohort):
    train_idx, test_idx = split_indices(cohort)
    overall = cohort[constants.encoded_label].mean()
    assert cohort.loc[train_idx, constants.encoded_label].mean() == pytest.approx(overall, abs=0.05)
    assert cohort.loc[test_idx, constants.encoded_label].mean() == pytest.approx(overall, abs=0.05)


def test_split_single_class_raises(cohort):
    single = cohort.assign(**{constants.encoded_label: 1})
    with pytest.raises(ConfigurationError):
        split_indices(single)


@pytest.mark.parametrize('train_size', [0, 1, 1.5, -0.2])
def test_split_rejects_invalid_proportion(cohort, train_size):
    with pytest.raises(ConfigurationError):
        split_indices(cohort, train_size=train_size)


def test_extract_X_y_projects_features_in_order(cohort):
    X, y = extract_X_y(cohort)
    assert list(X.columns) == constants.feature_columns
    assert y.name == constants.encoded_label
    assert X.index.equals(y.index)


def test_make_partition_returns_aligned_copies(cohort):
    X_train, X_test, y_train, y_test = make_partition(cohort, seed=321)
    assert X_train.index.equals(y_train.index)
    assert X_test.index.equals(y_test.index)
    assert len(X_train) + len(X_test) == len(cohort)

    X_train.loc[:, 'age'] = 0
    assert (cohort['age'] != 0).all()


def test_make_partition_matches_split_indices(cohort):
    train_idx, test_idx = split_indices(cohort, seed=123)
    X_train, X_test, _, _ = make_partition(cohort, seed=123)
    assert X_train.index.equals(train_idx)
    assert X_test.index.equals(test_idx)
    assert isinstance(X_train, pd.DataFrame)


def test_split_rejects_repeated_row_labels(cohort):
    half = len(cohort) // 2
    stacked = cohort.set_axis(list(cohort.index[:half]) + list(cohort.index[:len(cohort) - half]))
    with pytest.raises(DataFormatError):
        split_indices(stacked)
    with pytest.raises(DataFormatError):
        make_partition(stacked)
