from ._choice_encoder import ChoiceEncoder
from ._class_encoder import ClassEncoder

__all__ = [
    "ChoiceEncoder",
    "ClassEncoder"
]
