# imbus/interfaces/results.py

"""
Result container for proxy calculations.

A ProxyResult is produced by each call to ``compute_proxies`` and is not
retained by the dataset. It records the result table together with which
proxies were resolved and which calculation path produced them.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, List

from ..constants import PROXY_NAMES


class CalculationPath(str, Enum):
    """Branch taken by the proxy calculator."""
    FEFF_ONLY = "feff_only"
    FGEAR = "fgear"
    SPECIES = "species"


@dataclass(frozen=True, eq=False)
class ProxyResult:
    """
    Outcome of a proxy calculation.

    Attributes
    ----------
    table : pd.DataFrame
        Result table: join keys plus one column per computed proxy.
    proxies : tuple of str
        Proxies resolved from the request, in canonical order.
    path : CalculationPath
        Branch that produced the table.

    Examples
    --------
    >>> result = compute_proxies(data, proxies=['Fdist', 'Frealised'])
    >>> result.path
    <CalculationPath.SPECIES: 'species'>
    >>> result.proxy_columns
    ['Fdist', 'Frealised']
    """
    table: pd.DataFrame
    proxies: Tuple[str, ...]
    path: CalculationPath

    def validate(self) -> None:
        """
        Check every resolved proxy has a column holding no infinite values.

        Raises
        ------
        ValueError
            If a proxy column is missing or contains +/-inf.
        """
        for name in self.proxies:
            if name not in self.table.columns:
                raise ValueError(f"ProxyResult is missing column '{name}'")
            values = pd.to_numeric(self.table[name], errors="coerce").to_numpy(dtype=float)
            if np.isinf(values).any():
                raise ValueError(f"ProxyResult column '{name}' contains infinite values")

    @property
    def proxy_columns(self) -> List[str]:
        """Proxy columns present in the table, in canonical order."""
        return [name for name in PROXY_NAMES if name in self.table.columns]

    def __len__(self) -> int:
        return len(self.table)
