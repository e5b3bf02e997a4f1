import os.path

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from sklearn.tree import plot_tree
from sklearn.metrics import roc_curve, roc_auc_score

import constants

_class_colors = ['#d62728', '#1f77b4']   # 0 expired, 1 alive
_class_names = ['Expired', 'Alive']


def make_prediction_grid(X_train, features=None, resolution=constants.grid_resolution):
  """
  Build a rectangular lattice spanning the training data of two features
  :param X_train: Train feature matrix
  :param features: The two feature columns in model input order, defaults to constants.feature_columns
  :param resolution: Number of points per axis
  :return: The two meshgrid arrays and a DataFrame of resolution**2 rows holding the lattice
  """
  if features is None:
    features = constants.feature_columns
  x_col, y_col = features
  x_vals = np.linspace(X_train[x_col].min(), X_train[x_col].max(), resolution)
  y_vals = np.linspace(X_train[y_col].min(), X_train[y_col].max(), resolution)
  xx, yy = np.meshgrid(x_vals, y_vals)
  grid = pd.DataFrame({x_col: xx.ravel(), y_col: yy.ravel()})[list(features)]
  return xx, yy, grid


def plot_decision_boundary(model, X_train, X_test, y_test, title=None, ax=None, resolution=constants.grid_resolution):
  """
  Plot the predicted class regions of a model with the test set on top
  :param model: Fitted classifier
  :param X_train: Train feature matrix, bounds the grid
  :param X_test: Test feature matrix
  :param y_test: Test target labels
  :param title: Figure's title
  :param ax: Figure's axis
  :param resolution: Number of grid points per axis
  """
  if title is None:
    title = 'Decision boundary'
  if ax is None:
    plt_show = True
    fig, ax = plt.subplots(figsize=(8, 6))
  else:
    plt_show = False

  x_col, y_col = X_train.columns
  xx, yy, grid = make_prediction_grid(X_train, [x_col, y_col], resolution)
  Z = np.asarray(model.predict(grid)).reshape(xx.shape)

  ax.contourf(xx, yy, Z, levels=[-0.5, 0.5, 1.5], cmap=ListedColormap(_class_colors), alpha=0.25)

  y_pred = model.predict(X_test)
  correct = np.asarray(y_test) == y_pred
  for label in (0, 1):
    is_label = np.asarray(y_test) == label
    ax.scatter(X_test.loc[is_label & correct, x_col], X_test.loc[is_label & correct, y_col],
               color=_class_colors[label], marker='o', s=18, label=f'{_class_names[label]} (correct)')
    ax.scatter(X_test.loc[is_label & ~correct, x_col], X_test.loc[is_label & ~correct, y_col],
               color=_class_colors[label], marker='x', s=30, label=f'{_class_names[label]} (misclassified)')

  ax.set_title(title)
  ax.set_xlabel(x_col)
  ax.set_ylabel(y_col)
  ax.legend(loc='upper left', fontsize='small')

  if plt_show:
    plt.show()


def plot_tree_structure(model, features=None, title=None, ax=None):
  """
  Draw the splits of a fitted decision tree
  :param model: Fitted DecisionTreeClassifier
  :param features: Feature names in model input order
  :param title: Figure's title
  :param ax: Figure's axis
  """
  if features is None:
    features = constants.feature_columns
  if title is None:
    title = 'Decision tree'
  if ax is None:
    plt_show = True
    fig, ax = plt.subplots(figsize=(12, 6))
  else:
    plt_show = False

  plot_tree(model, feature_names=list(features), class_names=_class_names, filled=True, ax=ax)
  ax.set_title(title)

  if plt_show:
    plt.show()


def plot_roc_curve(model, X, y, sample_size, n_samples, seed=constants.split_seed, title=None, ax=None):
  """
  Plot a ROC curve with SD
  :param model: Predictive model
  :param X: Feature matrix
  :param y: Target labels
  :param sample_size: Size of each random sample of examples from X to calculate SD
  :param n_samples: Number of random samples of examples from X to calculate SD
  :param seed: Seed of the random samples
  :param title: Figure's title
  :param ax: Figure's axis
  """
  if title is None:
    title = 'ROC Curve'
  if ax is None:
    plt_show = True
    fig, ax = plt.subplots(figsize=(8, 6))
  else:
    plt_show = False

  rng = np.random.default_rng(seed)
  pool = np.arange(y.shape[0])
  tprs = []
  x_vals = np.linspace(0, 1, 100)

  for i in range(n_samples):
    sample = rng.choice(pool, size=sample_size, replace=False)
    sample_true = y.iloc[sample]
    if sample_true.nunique() < 2:
      continue
    sample_pred_probs = model.predict_proba(X.iloc[sample, :])[:, 1]

    fpr_arr, tpr_arr, _ = roc_curve(sample_true, sample_pred_probs)
    interp_tpr = np.interp(x_vals, fpr_arr, tpr_arr)
    interp_tpr[0] = 0
    tprs.append(interp_tpr)

  y_pred_probs = model.predict_proba(X)[:, 1]
  fpr_arr, tpr_arr, _ = roc_curve(y, y_pred_probs)
  area = roc_auc_score(y, y_pred_probs)
  interp_tpr = np.interp(x_vals, fpr_arr, tpr_arr)
  interp_tpr[0] = 0

  ax.plot(x_vals, interp_tpr, color='b', label='ROC Curve (AUC = %0.2f)' % area)
  ax.plot([0, 1], [0, 1], '--', color='orange', label='Luck (AUC = 0.5)')
  if tprs:
    std_tpr = np.std(tprs, axis=0)
    ax.fill_between(x_vals, np.maximum(interp_tpr - std_tpr, 0), np.minimum(interp_tpr + std_tpr, 1),
                    color='grey', alpha=0.5, label='SD')
  ax.set_title(title)
  ax.set_xlabel('FPR')
  ax.set_ylabel('TPR')
  ax.legend(loc='lower right')

  if plt_show:
    plt.show()


def save_figure(fig, name, figure_dir=constants.figure_dir):
  """
  Write a figure as PNG and return its path
  """
  os.makedirs(figure_dir, exist_ok=True)
  path = os.path.join(figure_dir, f'{name}.png')
  fig.savefig(path, dpi=150, bbox_inches='tight')
  return path
