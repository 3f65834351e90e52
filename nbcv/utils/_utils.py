import numpy as np

from sklearn.utils import check_random_state

from nbcv.data import Choice, Class, arrays_to_records


def make_votes(n_samples=100, n_attributes=16, random_state=None):
    """Random voting records.

    Each (class, attribute) pair gets its own distribution over the choices drawn
    from a flat Dirichlet, so attributes are informative about the class.

    Returns
    -------
    X : ndarray of shape (n_samples, n_attributes)
        Choice ordinals

    y : ndarray of shape (n_samples,)
        Class ordinals
    """
    rng = check_random_state(random_state)
    y = rng.randint(0, len(Class), size=n_samples)
    probabilities = rng.dirichlet(np.ones(len(Choice)), size=(len(Class), n_attributes))
    cumulative = np.cumsum(probabilities[y], axis=2)
    draws = rng.random_sample((n_samples, n_attributes, 1))
    X = (draws > cumulative).sum(axis=2)
    X = np.minimum(X, len(Choice) - 1)
    return X.astype(np.int64), y.astype(np.int64)


def make_vote_records(n_samples=100, n_attributes=16, random_state=None):
    X, y = make_votes(n_samples, n_attributes, random_state)
    return arrays_to_records(X, y)
