from ._split import fold_indices
from ._split import split_for_cross_validation


__all__ = [
    "fold_indices",
    "split_for_cross_validation"
]
