import pandas as pd

from nbcv.data import ATTRIBUTES_COUNT, Choice, Class, Record
from nbcv.encoder import ChoiceEncoder, ClassEncoder


def _check_field_counts(path, n_fields):
    """Raises on the first non blank line with fewer than n_fields comma separated fields"""
    with open(path) as f:
        for line_number, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if line.strip() and line.count(",") + 1 < n_fields:
                raise ValueError(f"Expected {n_fields} fields in line {line_number}, "
                                 f"got {line.count(',') + 1} instead")


def load_records(path, n_attributes=ATTRIBUTES_COUNT):
    """Reads a comma delimited dataset with the class in the first column.

    Parameters
    ----------
    path : str or path-like
        Location of the data file (UCI house-votes-84 like format, no header).

    n_attributes : int, default=ATTRIBUTES_COUNT
        Number of attribute columns following the class. Extra columns are ignored.

    Returns
    -------
    records : list of Record
    """
    _check_field_counts(path, n_attributes + 1)
    try:
        df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        raise ValueError(f"No records found in {path}")
    if df.shape[0] == 0:
        raise ValueError(f"No records found in {path}")

    y = ClassEncoder().fit_transform(df.iloc[:, 0].str.strip())
    X = ChoiceEncoder().fit_transform(df.iloc[:, 1:n_attributes + 1].apply(lambda column: column.str.strip()))
    return [Record(Class(label), tuple(Choice(v) for v in row)) for row, label in zip(X, y)]
