import pandas as pd
from sklearn.metrics import accuracy_score, roc_auc_score, confusion_matrix


def predict_test_set(model, X_test, y_test):
  """
  Run a fitted model on the held out set.

  :param model: Fitted classifier exposing predict and predict_proba
  :param X_test: Test feature matrix
  :param y_test: Test target labels

  :return: DataFrame with the following columns:
              - the feature columns of X_test
              - y_true: True encoded outcome
              - y_pred: Predicted encoded outcome
              - proba: Predicted probability of class 1 (alive)
              - correct: Whether the prediction matches the true label
  :rtype: pandas.DataFrame
  """
  results = X_test.copy()
  results['y_true'] = y_test.to_numpy()
  results['y_pred'] = model.predict(X_test)
  results['proba'] = model.predict_proba(X_test)[:, 1]
  results['correct'] = results['y_true'] == results['y_pred']
  return results


def evaluate_model(model, X_test, y_test):
  """
  Score a fitted model on the held out set
  :param model: Fitted classifier
  :param X_test: Test feature matrix
  :param y_test: Test target labels
  :return: Dictionary with accuracy, ROC AUC and the confusion matrix counts
  """
  results = predict_test_set(model, X_test, y_test)
  tn, fp, fn, tp = confusion_matrix(results['y_true'], results['y_pred'], labels=[0, 1]).ravel()
  # AUC is undefined on a single class test set
  auc = roc_auc_score(results['y_true'], results['proba']) if results['y_true'].nunique() == 2 else float('nan')
  return {'accuracy': accuracy_score(results['y_true'], results['y_pred']),
          'roc_auc': auc,
          'tn': tn, 'fp': fp, 'fn': fn, 'tp': tp}


def compare_models(models, X_test, y_test):
  """
  :param models: Dictionary from model name to fitted model
  :return: DataFrame with one row of test metrics per model
  """
  rows = {name: evaluate_model(model, X_test, y_test) for name, model in models.items()}
  comparison = pd.DataFrame.from_dict(rows, orient='index')
  comparison.index.name = 'model'
  return comparison
