from ._loader import load_records


__all__ = [
    "load_records",
]
