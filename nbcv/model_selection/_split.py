import numbers
import numpy as np

from sklearn.utils import check_random_state


def _check_n_splits(n_splits, n_samples):
    if isinstance(n_splits, bool) or not isinstance(n_splits, numbers.Integral):
        raise ValueError(f"n_splits must be an integer, got {n_splits!r} instead")
    if n_splits < 1:
        raise ValueError(f"n_splits must be at least 1, got {n_splits} instead")
    if n_samples == 0:
        raise ValueError("Cannot split an empty dataset")
    if n_splits > n_samples:
        raise ValueError(f"Cannot have n_splits={n_splits} greater than the number of samples ({n_samples}), "
                         "some folds would be empty")


def fold_indices(n_samples, n_splits=10, random_state=None):
    """Random assignment of sample indices to folds.

    The indices are shuffled and cut in n_splits contiguous chunks of n_samples // n_splits
    elements. The n_samples % n_splits indices left at the tail are appended one by one
    to the first folds, so fold sizes differ at most by one.

    Parameters
    ----------
    n_samples : int
        Number of samples to split

    n_splits : int, default=10
        Number of folds, between 1 and n_samples

    random_state : {None, int, RandomState}, default=None
        Source of the shuffling.

    Returns
    -------
    folds : list of ndarray
        List where `folds[k]` contains the indices of the kth fold in shuffle order.
    """
    _check_n_splits(n_splits, n_samples)
    rng = check_random_state(random_state)
    permutation = rng.permutation(n_samples)
    chunk_size = n_samples // n_splits
    remainder = n_samples % n_splits

    folds = [permutation[k*chunk_size:(k+1)*chunk_size] for k in range(n_splits)]
    tail = permutation[n_splits*chunk_size:]
    for k in range(remainder):
        folds[k] = np.append(folds[k], tail[k])
    return folds


def split_for_cross_validation(data, n_splits=10, random_state=None):
    """Splits a sequence of records in n_splits disjoint shuffled folds"""
    folds = fold_indices(len(data), n_splits=n_splits, random_state=random_state)
    return [[data[i] for i in fold] for fold in folds]

