"""
Player marks.
"""
from enum import Enum


class Mark(Enum):
    X = 'x'
    O = 'o'

    def swap(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value
