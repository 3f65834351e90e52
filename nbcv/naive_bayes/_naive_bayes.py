import numpy as np
import pandas as pd

from numba import njit
from scipy.special import logsumexp
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.utils import check_X_y, check_array
from sklearn.utils.validation import check_is_fitted

#Local Imports
from nbcv.data import Choice, Class, records_to_arrays


"""
Enhanced methods with Numba nopython mode
"""
@njit
def _get_counts(X: np.ndarray, y: np.ndarray, n_classes: int, n_choices: int):
    """Computes count of each class and of each value of each attribute for each class"""
    class_counts = np.zeros(n_classes)
    counts = np.zeros((n_classes, X.shape[1], n_choices))
    for i in range(X.shape[0]):
        class_counts[y[i]] += 1
        for j in range(X.shape[1]):
            counts[y[i], j, X[i, j]] += 1
    return class_counts, counts


@njit
def _predict(X: np.ndarray, attr_log_likelihood: np.ndarray, class_log_prior: np.ndarray):
    """Computes the log joint probability"""
    log_probability = np.zeros((X.shape[0], class_log_prior.shape[0]))
    for i in range(X.shape[0]):
        for c in range(class_log_prior.shape[0]):
            log_probability[i, c] = class_log_prior[c]
            for j in range(X.shape[1]):
                log_probability[i, c] += attr_log_likelihood[c, j, X[i, j]]
    return log_probability


def _is_record_sequence(X):
    return isinstance(X, (list, tuple)) and len(X) > 0 and hasattr(X[0], "attributes")


def _as_ordinals(array, name):
    """Casts to int64, rejecting values that are not whole numbers"""
    if array.dtype.kind == "f" and not np.array_equal(array, np.floor(array)):
        raise ValueError(f"{name} values must be integer ordinals, got non integral values")
    return array.astype(np.int64)


class NaiveBayes(ClassifierMixin, BaseEstimator):
    """A categorical Naive Bayes classifier.

    Probabilities are relative frequencies over the whole training set. Every
    (class, attribute, value) combination starts with one pseudo count so no
    likelihood is ever zero:

        class_prior[c] = count(c) / n_samples
        attr_likelihood[c, i, v] = (1 + count(c, i, v)) / n_samples

    Note the likelihood denominator is the size of the training set, not the number
    of samples of class c. Scores are base 10 log joint probabilities and the class
    with the greatest score is predicted, ties going to the lowest class ordinal.

    Parameters
    ----------
    n_classes : int, default=len(Class)
        Number of class values. Labels are expected as ordinals in [0, n_classes).

    n_choices : int, default=len(Choice)
        Number of values an attribute can take. Attributes are expected as ordinals
        in [0, n_choices).

    Attributes
    ----------
    row_count_ : int
        Number of training samples

    column_count_ : int
        Number of attributes

    class_values_count_ : array-like of shape (n_classes,)
        Array where `class_values_count_[c]` contains the count of the cth class value.

    feature_values_count_ : array-like of shape (n_classes, column_count_, n_choices)
        Array where `feature_values_count_[c, i, v]` contains the count of value v for the
        ith attribute among samples of class c.

    class_prior_ : array-like of shape (n_classes,)
        Estimated probability of each class.

    attr_likelihood_ : array-like of shape (n_classes, column_count_, n_choices)
        Estimated probability of each value of each attribute given the class. Strictly positive.

    class_log_prior_ : array-like of shape (n_classes,)
        log10 of class_prior_, -inf for classes not seen in training.

    attr_log_likelihood_ : array-like of shape (n_classes, column_count_, n_choices)
        log10 of attr_likelihood_.
    """
    def __init__(self, n_classes=len(Class), n_choices=len(Choice)):
        self.n_classes = n_classes
        self.n_choices = n_choices
        super().__init__()

    def _check_input(self, X, y=None, fitting=False):
        """Converts records or encoded arrays to integer ndarrays"""
        if _is_record_sequence(X):
            if y is not None:
                raise ValueError("y must not be given along with a sequence of records")
            X, y = records_to_arrays(X)
        if isinstance(X, pd.DataFrame):
            X = X.to_numpy()
        if isinstance(y, (pd.Series, pd.DataFrame)):
            y = y.to_numpy()
        if len(X) == 0:
            raise ValueError("Found an empty set of samples" + (", cannot fit the model" if fitting else ""))
        if y is None:
            if fitting:
                raise ValueError("Class values are needed to fit the model")
            X = _as_ordinals(check_array(X), "Attribute")
        else:
            X, y = check_X_y(X, y)
            X = _as_ordinals(X, "Attribute")
            y = _as_ordinals(y, "Class")
            if y.min() < 0 or y.max() >= self.n_classes:
                raise ValueError(f"Class values must be between 0 and {self.n_classes - 1}")
        if X.min() < 0 or X.max() >= self.n_choices:
            raise ValueError(f"Attribute values must be between 0 and {self.n_choices - 1}")
        if not fitting and X.shape[1] != self.column_count_:
            raise ValueError(f"Expected {self.column_count_} attributes, got {X.shape[1]} instead")
        return X, y

    def fit(self, X, y=None):
        """ Fits the classifier with training data.

        Parameters
        ----------

        X : {array-like of shape (n_samples, n_features), sequence of Record}
            Training array with Choice ordinals, or records (then y must be None)

        y : array-like of shape (n_samples,), default=None
            Class ordinal associated to each sample.

        Returns
        -------
        self : object
        """
        X, y = self._check_input(X, y, fitting=True)
        self.row_count_, self.column_count_ = X.shape
        self.class_values_count_, self.feature_values_count_ = _get_counts(X, y, self.n_classes, self.n_choices)

        increment = 1 / self.row_count_
        self.class_prior_ = self.class_values_count_ * increment
        self.attr_likelihood_ = (self.feature_values_count_ + 1) * increment
        self.class_log_prior_ = np.log10(self.class_prior_,
                                         out=np.full(self.n_classes, -np.inf),
                                         where=self.class_prior_ != 0)
        self.attr_log_likelihood_ = np.log10(self.attr_likelihood_)
        return self

    def predict_log_score(self, X):
        """Base 10 log joint probability of every sample under every class.

        Returns
        -------
        scores : array-like of shape (n_samples, n_classes)
        """
        check_is_fitted(self)
        X, _ = self._check_input(X)
        return _predict(X, self.attr_log_likelihood_, self.class_log_prior_)

    def predict(self, X):
        """ Predicts the label of the samples based on the MAP.

        Parameters
        ----------
        X : {array-like of shape (n_samples, n_features), sequence of Record}

        Returns
        -------
        y : array-like of shape (n_samples) or list of Class
            Predicted class ordinal for each sample. When records are given the
            predictions are returned as Class members.
        """
        records = _is_record_sequence(X)
        output = np.argmax(self.predict_log_score(X), axis=1)
        if records:
            return [Class(c) for c in output]
        return output

    def predict_proba(self, X):
        """ Normalized posterior probability of each class for each sample.

        Returns
        -------
        y : array-like of shape (n_samples, n_classes)
        """
        log_probability = self.predict_log_score(X) * np.log(10)
        log_prob_x = logsumexp(log_probability, axis=1)
        return np.exp(log_probability - np.atleast_2d(log_prob_x).T)

    def score(self, X, y=None):
        """Computes the accuracy

        Parameters
        ----------
        X : {array-like of shape (n_samples, n_features), sequence of Record}

        y : array-like of shape (n_samples,), default=None
            Class ordinal of each sample, None when X holds records.

        Returns
        -------
        score : float
                Fraction of correctly classified instances
        """
        check_is_fitted(self)
        if _is_record_sequence(X):
            if y is not None:
                raise ValueError("y must not be given along with a sequence of records")
            X, y = records_to_arrays(X)
        if len(X) == 0:
            raise ValueError("Cannot compute the accuracy of an empty test set")
        if y is None:
            raise ValueError("Class values are needed to compute the accuracy")
        y = np.asarray(y)
        return np.sum(self.predict(X) == y)/y.shape[0]
