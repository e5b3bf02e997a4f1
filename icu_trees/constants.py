data_path = 'data/eicu_cohort.csv'   # one row per ICU admission
figure_dir = 'figures'

outcome_column = 'actualhospitalmortality'
encoded_label = 'actualhospitalmortality_enc'
expired_value = 'EXPIRED'             # encoded as 0, everything else as 1

feature_columns = ['age', 'acutephysiologyscore']   # order expected by every model
required_columns = ['age', 'acutephysiologyscore', outcome_column]

aps_sentinel = -1           # acutephysiologyscore of -1 marks an invalid score
censored_age_value = 91.5   # ages above 89 are exported as "> 89"

train_size = 0.7
split_seed = 42
resample_seeds = [42, 123, 321]

grid_resolution = 100       # points per axis of the decision boundary grid

tree_params = {'max_depth': 2}
boosted_params = {'n_estimators': 30, 'max_depth': 2, 'learning_rate': 0.1}
forest_params = {'n_estimators': 50, 'max_features': 1}
bagging_params = {'n_estimators': 50}
model_params = {'tree': tree_params, 'boosted': boosted_params, 'forest': forest_params, 'bagging': bagging_params}
