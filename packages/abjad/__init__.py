from .table import LETTER_VALUES, LETTERS, letter_value
from .calculator import calculate_abjad

__all__ = ["LETTER_VALUES", "LETTERS", "letter_value", "calculate_abjad"]
