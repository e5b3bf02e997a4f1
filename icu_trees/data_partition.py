import constants
import pandas as pd
from sklearn.model_selection import train_test_split
from errors import ConfigurationError, DataFormatError


def extract_X_y(cohort, features=None, outcome=constants.encoded_label):
    """
    Split a matrix containing features and target labels to a feature matrix and a target labels vector
    :param cohort: Cleaned patient table
    :param features: Feature columns in model input order, defaults to constants.feature_columns
    :param outcome: Name of the target label column
    :return: A matrix containing the features and a vector containing the target labels
    """
    if features is None:
        features = constants.feature_columns
    X = cohort[list(features)].copy()
    y = cohort[outcome].copy()
    return X, y


def split_indices(cohort, outcome=constants.encoded_label, train_size=constants.train_size, seed=constants.split_seed):
    """
    Partition the rows of a cohort into train and test rows, stratified on the outcome.
    The partition only depends on the seed and on the row order of the cohort.
    :param cohort: Cleaned patient table
    :param outcome: Column to stratify on
    :param train_size: Proportion of rows assigned to the train set
    :param seed: Random seed of this split
    :return: Train row index and test row index
    """
    if not 0 < train_size < 1:
        raise ConfigurationError(f'train_size must be strictly between 0 and 1, got {train_size}')
    if not cohort.index.is_unique:
        raise DataFormatError('Cohort row labels must be unique to split it, reset the index first')
    labels = cohort[outcome]
    n_classes = labels.nunique()
    if n_classes < 2:
        raise ConfigurationError(f'Cannot stratify on "{outcome}": found {n_classes} distinct value(s), need at least 2')

    train_idx, test_idx = train_test_split(cohort.index, train_size=train_size, stratify=labels, random_state=seed)
    return pd.Index(train_idx), pd.Index(test_idx)


def make_partition(cohort, features=None, outcome=constants.encoded_label, train_size=constants.train_size,
                   seed=constants.split_seed):
    """
    Gets a cleaned cohort and returns train and test feature matrices and train and test target label vectors
    :param cohort: Cleaned patient table
    :param features: Feature columns in model input order
    :param outcome: Target label column
    :param train_size: Proportion of rows assigned to the train set
    :param seed: Random seed of this split
    :return: Train and test feature matrices and train and test target label vectors
    """
    train_idx, test_idx = split_indices(cohort, outcome=outcome, train_size=train_size, seed=seed)
    X_train, y_train = extract_X_y(cohort.loc[train_idx], features, outcome)
    X_test, y_test = extract_X_y(cohort.loc[test_idx], features, outcome)
    return X_train, X_test, y_train, y_test
