import numpy as np

from enum import IntEnum
from typing import NamedTuple, Tuple


ATTRIBUTES_COUNT = 16


class Choice(IntEnum):
    """Value of a categorical attribute. Unknown is a category of its own."""
    YES = 0
    NO = 1
    UNKNOWN = 2


class Class(IntEnum):
    REPUBLICAN = 0
    DEMOCRAT = 1


class Record(NamedTuple):
    label: Class
    attributes: Tuple[Choice, ...]


def records_to_arrays(records):
    """Dense representation of a record store.

    Parameters
    ----------
    records : sequence of Record
        Non empty collection where every record has the same number of attributes.

    Returns
    -------
    X : ndarray of shape (n_samples, n_attributes)
        Ordinal of the Choice of each attribute.

    y : ndarray of shape (n_samples,)
        Ordinal of the Class of each record.
    """
    if len(records) == 0:
        raise ValueError("Expected at least one record, got an empty collection")
    n_attributes = len(records[0].attributes)
    X = np.empty(shape=(len(records), n_attributes), dtype=np.int64)
    y = np.empty(shape=len(records), dtype=np.int64)
    for i, record in enumerate(records):
        if len(record.attributes) != n_attributes:
            raise ValueError(f"Expected {n_attributes} attributes, got {len(record.attributes)} instead in record {i}")
        X[i] = record.attributes
        y[i] = record.label
    return X, y


def arrays_to_records(X, y):
    return [Record(Class(label), tuple(Choice(v) for v in row)) for row, label in zip(X, y)]
