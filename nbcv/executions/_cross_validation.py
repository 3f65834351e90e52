import numpy as np
import pandas as pd

from typing import NamedTuple
from tqdm.autonotebook import tqdm

from nbcv.model_selection import split_for_cross_validation
from nbcv.naive_bayes import NaiveBayes


CROSSVALIDATION_SPLITS = 10


class CrossValidationResult(NamedTuple):
    scores: np.ndarray
    mean_score: float


def cross_validation(data, n_splits=CROSSVALIDATION_SPLITS, random_state=None, verbose=0):
    """K-fold cross-validation of the NaiveBayes classifier.

    The records are partitioned once and the same folds are used in every round: the
    kth round fits a new classifier on every fold but the kth and scores it on the kth.

    Parameters
    ----------
    data : sequence of Record
        Non empty record store.

    n_splits : int, default=CROSSVALIDATION_SPLITS
        Number of folds, between 2 and len(data).

    random_state : {None, int, RandomState}, default=None
        Source of the shuffling used for the fold assignment.

    verbose : {boolean,int}
        If set to true it displays a progress bar over the folds.

    Returns
    -------
    result : CrossValidationResult
        Accuracy of each fold in fold order and their mean.
    """
    if len(data) == 0:
        raise ValueError("Cannot cross-validate an empty dataset")
    if isinstance(n_splits, int) and not isinstance(n_splits, bool) and n_splits == 1:
        raise ValueError("At least two folds are needed, with n_splits=1 the training set would be empty")
    folds = split_for_cross_validation(data, n_splits=n_splits, random_state=random_state)

    scores = np.zeros(len(folds))
    iterator = tqdm(range(len(folds)), leave=False, bar_format='{l_bar}{bar:20}{r_bar}{bar:-10b}') \
        if verbose else range(len(folds))
    for testing_set_idx in iterator:
        training_set = [row for i, fold in enumerate(folds) if i != testing_set_idx for row in fold]
        model = NaiveBayes().fit(training_set)
        scores[testing_set_idx] = model.score(folds[testing_set_idx])
        if verbose:
            iterator.set_postfix({"fold": testing_set_idx, "accuracy": scores[testing_set_idx]})
    return CrossValidationResult(scores, float(np.mean(scores)))


def cross_validation_report(result):
    """Per fold accuracy table"""
    return pd.DataFrame({"fold": np.arange(result.scores.shape[0]), "accuracy": result.scores},
                        columns=["fold", "accuracy"])


def format_report(result):
    lines = [f"Accuracy {fold}: {accuracy}"
             for fold, accuracy in cross_validation_report(result).itertuples(index=False)]
    lines.append(f"Average accuracy: {result.mean_score}")
    return "\n".join(lines)
