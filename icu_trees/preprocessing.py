import logging

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin

import constants
from errors import DataFormatError

logger = logging.getLogger(__name__)


def check_required_columns(cohort, columns=None):
  """
  Fail fast when the cohort lacks columns the pipeline relies on
  :param cohort: Patient table
  :param columns: Columns that must be present, defaults to constants.required_columns
  """
  if columns is None:
    columns = constants.required_columns
  missing_cols = [col for col in columns if col not in cohort.columns]
  if missing_cols:
    raise DataFormatError(f'Cohort is missing required columns: {missing_cols}')


def encode_outcome(cohort):
  """
  Add a binary outcome label: 0 for expired patients and 1 for every other outcome value
  :param cohort: Patient table containing the hospital mortality column
  :return: Copy of the table with the encoded label column added
  """
  check_required_columns(cohort, [constants.outcome_column])
  cohort = cohort.copy()
  cohort[constants.encoded_label] = np.where(cohort[constants.outcome_column] == constants.expired_value, 0, 1)
  return cohort


def drop_aps_outliers(cohort):
  """
  Remove admissions whose acute physiology score is the -1 sentinel
  :param cohort: Patient table
  :return: Copy of the table without the sentinel rows
  """
  check_required_columns(cohort, ['acutephysiologyscore'])
  try:
    scores = pd.to_numeric(cohort['acutephysiologyscore'], errors='raise')
  except (ValueError, TypeError) as e:
    raise DataFormatError(f'acutephysiologyscore must be numeric: {e}') from e
  keep = scores != constants.aps_sentinel
  cohort = cohort.loc[keep].copy()
  cohort['acutephysiologyscore'] = scores[keep].to_numpy()
  return cohort


class CensoredAgeImputer(BaseEstimator, TransformerMixin):
  """
  Provide this to a pipeline in order to replace censored or unparseable ages (e.g. "> 89") with a fixed value
  """
  def __init__(self, fill_value=constants.censored_age_value):
    self.fill_value = fill_value

  def fit(self, X, y=None):
    return self

  def transform(self, X, y=None):
    X_copy = X.copy()
    X_copy['age'] = pd.to_numeric(X_copy['age'], errors='coerce').fillna(self.fill_value)
    return X_copy


def impute_censored_age(cohort):
  check_required_columns(cohort, ['age'])
  return CensoredAgeImputer().fit_transform(cohort)


def clean_cohort(cohort):
  """
  Apply the cleaning steps in order: sentinel score filter, censored age imputation, outcome encoding.
  The input table is left untouched and the original row index is kept.
  :param cohort: Raw patient table
  :return: Cleaned patient table
  """
  check_required_columns(cohort)
  cleaned = drop_aps_outliers(cohort)
  n_censored = pd.to_numeric(cleaned['age'], errors='coerce').isna().sum()
  cleaned = impute_censored_age(cleaned)
  cleaned = encode_outcome(cleaned)
  logger.info('Dropped %d rows with sentinel score, imputed %d censored ages',
              len(cohort) - len(cleaned), n_censored)
  return cleaned


def describe_cohort(cohort):
  """
  Summarize the size and class balance of a cleaned cohort
  :param cohort: Cleaned patient table
  :return: Dictionary with the row count and the share of each encoded class
  """
  balance = cohort[constants.encoded_label].value_counts(normalize=True).sort_index()
  return {'n_rows': len(cohort), 'class_balance': balance.round(3).to_dict()}
