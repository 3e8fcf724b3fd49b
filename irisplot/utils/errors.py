"""
Exceptions raised by the chart pipeline.
"""

from typing import Optional


class DataFormatError(ValueError):
    """
    Input data cannot be turned into chart geometry.

    Raised for unparseable or missing measurements, missing columns, empty
    datasets and zero-width axis domains. ``row`` is the 1-based data row
    (header excluded) and ``column`` the source column, when known.
    """

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        column: Optional[str] = None
    ):
        super().__init__(message)
        self.row = row
        self.column = column
