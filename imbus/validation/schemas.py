# imbus/validation/schemas.py

"""
Error types and column checks for the survey input tables.

Every check here fails fast: the first violation raises and the calling
computation is abandoned with no partial result.
"""

import pandas as pd
from typing import Iterable, List, Optional


class ImbusError(Exception):
    """Base class for errors raised by the proxy pipeline."""
    pass


class MissingColumnError(ImbusError):
    """Raised when an input table lacks one or more role-mapped columns."""

    def __init__(self, table: str, missing: List[str], found: Optional[List[str]] = None):
        self.table = table
        self.missing = list(missing)
        self.found = list(found) if found is not None else []
        super().__init__(
            f"Missing columns in {table} data: {', '.join(map(str, self.missing))}. "
            f"Found: {self.found}"
        )


class NoComputableProxyError(ImbusError):
    """Raised when none of the requested proxies can be computed."""

    def __init__(self, requested: Iterable[str], available: Iterable[str]):
        self.requested = list(requested)
        self.available = list(available)
        super().__init__(
            "No requested proxies can be calculated with available data: "
            f"requested {self.requested}, available {self.available}"
        )


class InvalidDatasetError(ImbusError):
    """Raised when a SurveyDataset cannot be constructed from its tables."""

    def __init__(self, table: str, reason: str):
        self.table = table
        self.reason = reason
        super().__init__(f"Invalid {table} table: {reason}")


def require_columns(df: pd.DataFrame, columns: Iterable[str], table: str) -> None:
    """
    Check that every column in ``columns`` exists in ``df``.

    Parameters
    ----------
    df : pd.DataFrame
        Table to check.
    columns : iterable of str
        Required column names.
    table : str
        Table name used in the error message (e.g. 'effort').

    Raises
    ------
    MissingColumnError
        Listing every missing column, not just the first.
    """
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise MissingColumnError(table, missing, list(df.columns))
