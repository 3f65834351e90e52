import numpy as np
import pandas as pd

from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from nbcv.data import Choice


DEFAULT_CHOICE_TOKENS = {"y": Choice.YES, "n": Choice.NO}


class ChoiceEncoder(TransformerMixin, BaseEstimator):
    """Attribute token encoder.

    Encodes raw attribute tokens to the ordinal of their Choice using numpy's
    searchsorted method over a fixed vocabulary. Every token outside the vocabulary
    (missing value marks such as '?' included) is transformed to Choice.UNKNOWN.

    Parameters
    ----------
    tokens : dict or None, default=None
        Mapping from raw token to Choice. If None {'y': YES, 'n': NO} is used.

    Attributes
    ----------
    sorted_tokens_ : array-like of shape (n_tokens,)
        Known tokens in alphanumeric order

    sorted_encoded_ : array-like of shape (n_tokens,)
        Ordinal of the Choice of each token in sorted_tokens_
    """

    def __init__(self, tokens=None):
        self.tokens = tokens

    def fit(self, X=None, y=None):
        tokens = DEFAULT_CHOICE_TOKENS if self.tokens is None else self.tokens
        if Choice.UNKNOWN in tokens.values():
            raise ValueError("Choice.UNKNOWN is reserved for unrecognized tokens")
        keys = np.array(list(tokens.keys()), dtype=str)
        values = np.array([int(v) for v in tokens.values()])
        sort_index = keys.argsort()
        self.sorted_tokens_ = keys[sort_index]
        self.sorted_encoded_ = values[sort_index]
        return self

    def transform(self, X, y=None):
        check_is_fitted(self)
        if isinstance(X, pd.DataFrame):
            X = X.to_numpy()
        X = np.asarray(X).astype(str)
        idx = np.searchsorted(self.sorted_tokens_, X)
        idx[idx == self.sorted_tokens_.shape[0]] = 0
        mask = self.sorted_tokens_[idx] == X
        return np.where(mask, self.sorted_encoded_[idx], int(Choice.UNKNOWN)).astype(np.int64)

    def inverse_transform(self, X, y=None):
        '''Unknown values are restored as "?"'''
        check_is_fitted(self)
        X = np.asarray(X)
        lookup = np.full(len(Choice), "?", dtype=object)
        lookup[self.sorted_encoded_] = self.sorted_tokens_
        return lookup[X]

    def fit_transform(self, X, y=None):
        return self.fit(X, y).transform(X, y)
