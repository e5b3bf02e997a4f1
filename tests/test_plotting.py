import matplotlib.pyplot as plt
import numpy as np
import pytest

import constants
import plotting
from modeling import fit_model


@pytest.fixture
def tree(partition):
    X_train, _, y_train, _ = partition
    return fit_model('tree', X_train, y_train, **constants.tree_params)


def test_prediction_grid_spans_training_data(partition):
    X_train = partition[0]
    xx, yy, grid = plotting.make_prediction_grid(X_train)
    assert xx.shape == yy.shape == (100, 100)
    assert len(grid) == 100 * 100
    assert list(grid.columns) == constants.feature_columns
    for col in constants.feature_columns:
        assert grid[col].min() == pytest.approx(X_train[col].min())
        assert grid[col].max() == pytest.approx(X_train[col].max())


def test_prediction_grid_axes_are_evenly_spaced(partition):
    xx, yy, _ = plotting.make_prediction_grid(partition[0], resolution=5)
    assert np.allclose(np.diff(xx[0]), np.diff(xx[0])[0])
    assert np.allclose(np.diff(yy[:, 0]), np.diff(yy[:, 0])[0])


def test_plot_decision_boundary_draws_on_given_axis(tree, partition):
    X_train, X_test, _, y_test = partition
    fig, ax = plt.subplots()
    plotting.plot_decision_boundary(tree, X_train, X_test, y_test, title='tree', ax=ax, resolution=20)
    assert ax.get_title() == 'tree'
    assert ax.get_xlabel() == 'age'
    assert ax.get_ylabel() == 'acutephysiologyscore'
    assert ax.collections
    plt.close(fig)


def test_plot_tree_structure(tree):
    fig, ax = plt.subplots()
    plotting.plot_tree_structure(tree, ax=ax)
    assert ax.texts
    plt.close(fig)


def test_plot_roc_curve(tree, partition):
    _, X_test, _, y_test = partition
    fig, ax = plt.subplots()
    plotting.plot_roc_curve(tree, X_test, y_test, sample_size=50, n_samples=5, seed=1, ax=ax)
    assert len(ax.lines) == 2
    plt.close(fig)


def test_save_figure_writes_png(tmp_path):
    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1])
    path = plotting.save_figure(fig, 'line', str(tmp_path / 'figures'))
    plt.close(fig)
    assert path.endswith('line.png')
    assert (tmp_path / 'figures' / 'line.png').exists()
