from ._cross_validation import CROSSVALIDATION_SPLITS
from ._cross_validation import CrossValidationResult
from ._cross_validation import cross_validation
from ._cross_validation import cross_validation_report
from ._cross_validation import format_report

__all__ = [
    "CROSSVALIDATION_SPLITS",
    "CrossValidationResult",
    "cross_validation",
    "cross_validation_report",
    "format_report",
]
