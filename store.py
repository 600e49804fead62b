# store.py
"""
Row-oriented storage seen by the onboarding logic.

Rows and columns are 1-based, as in a spreadsheet; row 1 holds headers.
"""

from abc import ABC, abstractmethod


class RowStore(ABC):

    @abstractmethod
    def get_cell(self, row: int, col: int):
        """Value at (row, col); an empty cell reads as ""."""

    @abstractmethod
    def set_cell(self, row: int, col: int, value) -> None:
        """Durably write value to (row, col)."""

    @abstractmethod
    def row_count(self) -> int:
        """Index of the last row holding data (headers included)."""

    @abstractmethod
    def column_count(self) -> int:
        """Index of the last column holding data."""

    def row_values(self, row: int, width: int):
        """The first `width` values of a row, in column order."""
        return [self.get_cell(row, col) for col in range(1, width + 1)]

    def rows(self, width: int):
        """Every row (headers first), each padded or cut to `width` values."""
        return [self.row_values(row, width) for row in range(1, self.row_count() + 1)]


def check_coordinates(row: int, col: int) -> None:
    if row < 1 or col < 1:
        raise IndexError(f"cell ({row}, {col}) is out of range")


def is_blank(value) -> bool:
    return value is None or not str(value).strip()
