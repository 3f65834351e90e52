import numpy as np
import pandas as pd

from sklearn.base import BaseEstimator
from sklearn.utils.validation import check_is_fitted

from nbcv.data import Class


DEFAULT_CLASS_TOKENS = {"republican": Class.REPUBLICAN, "democrat": Class.DEMOCRAT}


class ClassEncoder(BaseEstimator):
    """Label encoder

    Label encoder using numpy's searchsorted method to encode class tokens to the ordinal
    of their Class. Unlike attributes, an unseen label cannot be mapped to anything
    meaningful so it raises a ValueError.

    Parameters
    ----------
    tokens : dict or None, default=None
        Mapping from raw token to Class. If None {'republican': REPUBLICAN, 'democrat': DEMOCRAT}
        is used.

    Attributes
    ----------
    classes_ : array-like of shape (n_tokens,)
        Known tokens sorted in alphanumeric order

    encoded_ : array-like of shape (n_tokens,)
        Ordinal of the Class of each token in classes_
    """

    def __init__(self, tokens=None):
        self.tokens = tokens

    def fit(self, y=None):
        tokens = DEFAULT_CLASS_TOKENS if self.tokens is None else self.tokens
        keys = np.array(list(tokens.keys()), dtype=str)
        values = np.array([int(v) for v in tokens.values()])
        sort_index = keys.argsort()
        self.classes_ = keys[sort_index]
        self.encoded_ = values[sort_index]
        return self

    def transform(self, y):
        check_is_fitted(self)
        if isinstance(y, (pd.Series, pd.DataFrame)):
            y = y.to_numpy()
        y = np.asarray(y).astype(str).ravel()
        classes = self.classes_
        idx = np.searchsorted(classes, y)
        idx[idx == classes.shape[0]] = 0
        mask = classes[idx] == y
        if not mask.all():
            unknown = np.unique(y[~mask])
            raise ValueError(f"Unknown class {unknown[0]!r}, expected one of {tuple(classes)}")
        return self.encoded_[idx].astype(np.int64)

    def inverse_transform(self, y):
        check_is_fitted(self)
        lookup = np.empty(len(Class), dtype=object)
        lookup[self.encoded_] = self.classes_
        return lookup[np.asarray(y)]

    def fit_transform(self, y):
        return self.fit(y).transform(y)
