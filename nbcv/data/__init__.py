from ._types import ATTRIBUTES_COUNT
from ._types import Choice
from ._types import Class
from ._types import Record
from ._types import records_to_arrays
from ._types import arrays_to_records


__all__ = [
    "ATTRIBUTES_COUNT",
    "Choice",
    "Class",
    "Record",
    "records_to_arrays",
    "arrays_to_records",
]
