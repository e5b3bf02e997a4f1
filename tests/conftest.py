import matplotlib

matplotlib.use('Agg')

import numpy as np
import pandas as pd
import pytest

import constants
from data_partition import make_partition
from preprocessing import clean_cohort


def make_raw_cohort(n_rows=500, n_sentinel=10, n_censored=5, expired_share=0.4, seed=0):
    """Synthetic admissions table; sentinel and censored rows are disjoint and placed at the start."""
    rng = np.random.default_rng(seed)
    age = rng.integers(18, 89, size=n_rows).astype(str).astype(object)
    score = rng.integers(0, 150, size=n_rows)
    score[:n_sentinel] = -1
    age[n_sentinel:n_sentinel + n_censored] = '> 89'
    n_expired = int(round(n_rows * expired_share))
    outcome = np.array(['EXPIRED'] * n_expired + ['ALIVE'] * (n_rows - n_expired), dtype=object)
    rng.shuffle(outcome)
    return pd.DataFrame({
        'patientunitstayid': np.arange(100000, 100000 + n_rows),
        'age': age,
        'acutephysiologyscore': score,
        'actualhospitalmortality': outcome,
    })


@pytest.fixture
def raw_cohort():
    return make_raw_cohort()


@pytest.fixture
def cohort(raw_cohort):
    return clean_cohort(raw_cohort)


@pytest.fixture
def cohort_csv(tmp_path, raw_cohort):
    path = tmp_path / 'cohort.csv'
    raw_cohort.to_csv(path, index=False)
    return path


@pytest.fixture
def partition(cohort):
    return make_partition(cohort, seed=constants.split_seed)
