import logging

import pandas as pd

import constants
from preprocessing import check_required_columns, clean_cohort

logger = logging.getLogger(__name__)


def load_cohort(path):
    """
    Read the admissions table from a comma separated file with a header row
    :param path: Path of the CSV file
    :return: Raw patient table, extra columns included
    """
    # age stays textual so censored markers such as "> 89" reach the cleaner intact
    cohort = pd.read_csv(path, dtype={'age': str})
    check_required_columns(cohort)
    logger.info('Loaded %d admissions from %s', len(cohort), path)
    return cohort


def generate_cohort(path=constants.data_path):
    """
    Load and clean the cohort
    :param path: Path of the CSV file
    :return: Cleaned patient table
    """
    return clean_cohort(load_cohort(path))
