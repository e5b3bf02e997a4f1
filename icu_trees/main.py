import argparse
import logging
import sys

import matplotlib.pyplot as plt

import constants
import plotting
from data_extraction import generate_cohort
from data_partition import make_partition
from evaluation import compare_models
from modeling import train_models, train_on_resamples
from preprocessing import describe_cohort

logger = logging.getLogger(__name__)


def run(data_path, figure_dir, show=False):
    cohort = generate_cohort(data_path)
    logger.info('Cleaned cohort: %s', describe_cohort(cohort))

    X_train, X_test, y_train, y_test = make_partition(cohort, seed=constants.split_seed)
    logger.info('Train rows: %d, test rows: %d', len(X_train), len(X_test))

    models = train_models(X_train, y_train, seed=constants.split_seed)
    logger.info('Test set performance:\n%s', compare_models(models, X_test, y_test).round(3).to_string())

    for kind, model in models.items():
        fig, ax = plt.subplots(figsize=(8, 6))
        plotting.plot_decision_boundary(model, X_train, X_test, y_test, title=f'{kind} decision boundary', ax=ax)
        plotting.save_figure(fig, f'boundary_{kind}', figure_dir)

    fig, ax = plt.subplots(figsize=(12, 6))
    plotting.plot_tree_structure(models['tree'], ax=ax)
    plotting.save_figure(fig, 'tree_structure', figure_dir)

    fig, ax = plt.subplots(figsize=(8, 6))
    plotting.plot_roc_curve(models['boosted'], X_test, y_test, sample_size=len(X_test) // 2, n_samples=20,
                            seed=constants.split_seed, title='boosted ROC curve', ax=ax)
    plotting.save_figure(fig, 'roc_boosted', figure_dir)

    # same tree, three different subsamples
    runs = train_on_resamples(cohort, 'tree', seeds=constants.resample_seeds, **constants.tree_params)
    fig, axes = plt.subplots(1, len(runs), figsize=(6 * len(runs), 5), squeeze=False)
    for ax, resample in zip(axes[0], runs):
        plotting.plot_decision_boundary(resample['model'], resample['X_train'], resample['X_test'], resample['y_test'],
                                        title=f'tree, seed {resample["seed"]}', ax=ax)
    plotting.save_figure(fig, 'tree_resamples', figure_dir)
    logger.info('Figures written to %s', figure_dir)

    if show:
        plt.show()
    plt.close('all')
    return models


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(name)s %(levelname)s: %(message)s',
                        handlers=[logging.StreamHandler(sys.stdout)])

    parser = argparse.ArgumentParser(description='Fit tree models to the ICU cohort and plot their decision boundaries')
    parser.add_argument('data_path', nargs='?', default=constants.data_path, help='CSV file with one row per admission')
    parser.add_argument('--figure-dir', default=constants.figure_dir, help='Directory for the PNG figures')
    parser.add_argument('--show', action='store_true', help='Also display the figures')
    args = parser.parse_args()

    run(args.data_path, args.figure_dir, args.show)
