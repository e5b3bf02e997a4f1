import logging

import constants
from xgboost.sklearn import XGBClassifier
from sklearn.tree import DecisionTreeClassifier
from sklearn.ensemble import RandomForestClassifier, BaggingClassifier
from data_partition import make_partition
from errors import ConfigurationError, DataFormatError

logger = logging.getLogger(__name__)


def build_tree(max_depth=None, seed=constants.split_seed):
    return DecisionTreeClassifier(max_depth=max_depth, random_state=seed)


def build_boosted(n_estimators=100, max_depth=2, seed=constants.split_seed, learning_rate=0.1):
    """
    Gradient boosted trees
    :param n_estimators: Number of boosting iterations
    :param max_depth: Interaction depth of every tree
    :param seed: Random seed
    :param learning_rate: Shrinkage applied to every iteration
    """
    return XGBClassifier(n_estimators=n_estimators, max_depth=max_depth, learning_rate=learning_rate,
                         random_state=seed)


def build_forest(n_estimators=100, max_features=1, seed=constants.split_seed):
    """
    Random forest
    :param n_estimators: Number of trees
    :param max_features: Number of features sampled at every split
    :param seed: Random seed of the bootstrap samples and of the feature sampling
    """
    return RandomForestClassifier(n_estimators=n_estimators, max_features=max_features, random_state=seed)


def build_bagging(n_estimators=100, seed=constants.split_seed):
    """
    Bagged decision trees: bootstrap samples, every feature considered at every split
    """
    return BaggingClassifier(estimator=DecisionTreeClassifier(), n_estimators=n_estimators, random_state=seed)


_builders = {'tree': build_tree, 'boosted': build_boosted, 'forest': build_forest, 'bagging': build_bagging}


def build_model(kind, seed=constants.split_seed, **params):
    """
    Build an unfitted model of the given kind, hyperparameters are passed through verbatim
    :param kind: One of 'tree', 'boosted', 'forest', 'bagging'
    :param seed: Random seed
    :return: Unfitted classifier
    """
    if kind not in _builders:
        raise ConfigurationError(f'Unknown model kind "{kind}", expected one of {sorted(_builders)}')
    return _builders[kind](seed=seed, **params)


def fit_model(kind, X_train, y_train, seed=constants.split_seed, **params):
    """
    Fit a model on the two feature matrix
    :param kind: One of 'tree', 'boosted', 'forest', 'bagging'
    :param X_train: Feature matrix with exactly the columns of constants.feature_columns
    :param y_train: Target labels aligned row for row with X_train
    :param seed: Random seed
    :return: Fitted classifier
    """
    if list(X_train.columns) != constants.feature_columns:
        raise DataFormatError(f'Expected feature columns {constants.feature_columns}, got {list(X_train.columns)}')
    if len(X_train) != len(y_train) or not X_train.index.equals(y_train.index):
        raise DataFormatError('Feature matrix and target labels are not aligned')

    model = build_model(kind, seed=seed, **params)
    model.fit(X_train, y_train)
    logger.info('Done fitting %s model', kind)
    return model


def train_models(X_train, y_train, seed=constants.split_seed, model_params=None):
    """
    Fit every model kind with the hyperparameters defined in advance
    :param X_train: Feature matrix
    :param y_train: Target labels
    :param seed: Random seed handed to every model
    :param model_params: Hyperparameters per model kind, defaults to constants.model_params
    :return: Dictionary from model kind to fitted model
    """
    if model_params is None:
        model_params = constants.model_params
    return {kind: fit_model(kind, X_train, y_train, seed=seed, **params) for kind, params in model_params.items()}


def train_on_resamples(cohort, kind='tree', seeds=None, train_size=constants.train_size, **params):
    """
    Re-split the cohort and refit the same model once per seed, to show how much a model changes
    with the subsample it was trained on
    :param cohort: Cleaned patient table
    :param kind: Model kind
    :param seeds: One seed per resample, used for both the split and the model
    :param train_size: Proportion of rows assigned to the train set
    :return: List of dictionaries with the seed, the fitted model and its partition
    """
    if seeds is None:
        seeds = constants.resample_seeds
    runs = []
    for seed in seeds:
        X_train, X_test, y_train, y_test = make_partition(cohort, train_size=train_size, seed=seed)
        model = fit_model(kind, X_train, y_train, seed=seed, **params)
        runs.append({'seed': seed, 'model': model,
                     'X_train': X_train, 'X_test': X_test, 'y_train': y_train, 'y_test': y_test})
    return runs
