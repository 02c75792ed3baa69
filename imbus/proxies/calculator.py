# imbus/proxies/calculator.py

"""
Calculation of the F proxies from a SurveyDataset.

Supported proxies:
- Feff: effort-based F = SweptArea / Area
- Fgear: gear-corrected F = Feff x GearEfficiency
- Fdist: distribution-weighted F = Feff x RelativeAbundance
- Frealised: realised F = Fdist x GearEfficiency

Which of them can be computed depends on the tables the dataset holds (see
:mod:`imbus.proxies.availability`). The calculator always computes Feff,
then takes one of three paths:

    FEFF_ONLY   only Feff resolved
    FGEAR       gear efficiency without species distribution
    SPECIES     species distribution, optionally with gear efficiency

Example
-------
>>> from imbus import SurveyDataset
>>> from imbus.proxies import compute_proxies
>>> data = SurveyDataset(effort=effort_df, spatial=spatial_df,
...                      species=species_df, gear_efficiency=gear_eff_df)
>>> result = compute_proxies(data, proxies=['Fdist', 'Frealised'])
>>> result.table[['Code', 'Age', 'StatRec', 'Fdist', 'Frealised']].head()
"""

import logging
import pandas as pd
from typing import Iterable, List

from ..constants import FEFF, FGEAR, FDIST, FREALISED, EFFICIENCY, PROXY_NAMES
from ..interfaces.results import ProxyResult, CalculationPath
from .availability import resolve_proxies
from .feff import calc_feff
from .padding import pad_ages, pad_gear_efficiency
from .reshape import combine_feff_species, melt_gear_efficiency

logger = logging.getLogger(__name__)


class ProxyCalculator:
    """
    Computes F proxies for one SurveyDataset.

    Parameters
    ----------
    dataset : SurveyDataset
        Input tables and column mapping.
    fished : bool, optional
        If True (default), Feff covers fished cells only; if False, every
        spatial unit is included with unfished cells at 0.
    aggregate : bool, optional
        If True (default), sum swept area to gear, spatial unit and time.
    """

    def __init__(self, dataset, fished: bool = True, aggregate: bool = True):
        self.dataset = dataset
        self.config = dataset.config
        self.fished = fished
        self.aggregate = aggregate

    def compute(self, proxies: Iterable[str] = PROXY_NAMES) -> ProxyResult:
        """
        Compute the requested proxies that the data supports.

        Parameters
        ----------
        proxies : iterable of str, optional
            Proxies to compute (default: all four). Those not computable from
            the dataset are skipped.

        Returns
        -------
        ProxyResult
            Result table, resolved proxies and calculation path.

        Raises
        ------
        NoComputableProxyError
            If none of the requested proxies can be computed.
        MissingColumnError
            If an input table lacks a required column.
        """
        data = self.dataset
        resolved = resolve_proxies(proxies, data.has_species, data.has_gear_efficiency)
        logger.info("Resolved proxies: %s", resolved)

        feff = calc_feff(data, fished=self.fished, aggregate=self.aggregate)

        if resolved == [FEFF]:
            return self._result(feff, resolved, CalculationPath.FEFF_ONLY)

        if FGEAR in resolved:
            return self._result(self._fgear(feff), resolved, CalculationPath.FGEAR)

        if FDIST in resolved or FREALISED in resolved:
            return self._result(self._species(feff, resolved), resolved, CalculationPath.SPECIES)

        return self._result(feff, resolved, CalculationPath.FEFF_ONLY)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def _fgear(self, feff: pd.DataFrame) -> pd.DataFrame:
        """Feff x efficiency, one row per Feff cell and (species, age) of its gear."""
        gear_long = melt_gear_efficiency(self.dataset.gear_efficiency, self.config)
        f = feff.merge(gear_long, on=self.config.gear_field, how="left")
        f[FGEAR] = f[FEFF] * f[EFFICIENCY]
        return f

    def _species(self, feff: pd.DataFrame, resolved: List[str]) -> pd.DataFrame:
        """Fdist (and Frealised) on the age-padded species distribution."""
        config = self.config
        species = pad_ages(self.dataset.species, config)
        gear_names = list(feff[config.gear_field].dropna().unique())

        f = combine_feff_species(feff, species, gear_names, config)
        f[FDIST] = f[FEFF] * f[config.abundance_field]

        if FREALISED in resolved:
            # padded ages, not only observed ones, receive carried-forward efficiency
            gear_eff = pad_gear_efficiency(self.dataset.gear_efficiency, species, config)
            gear_long = melt_gear_efficiency(gear_eff, config)
            f = f.merge(
                gear_long,
                on=[config.species_field, config.age_field, config.gear_field],
                how="left",
            )
            f[FREALISED] = f[FDIST] * f[EFFICIENCY]

        if FEFF not in resolved:
            f = f.drop(columns=FEFF)
        return f

    def _result(self, table: pd.DataFrame, resolved: List[str], path: CalculationPath) -> ProxyResult:
        logger.info("Proxy calculation path %s produced %d rows", path.value, len(table))
        return ProxyResult(table=table, proxies=tuple(resolved), path=path)


def compute_proxies(dataset, proxies: Iterable[str] = PROXY_NAMES,
                    fished: bool = True, aggregate: bool = True) -> ProxyResult:
    """
    Calculate F proxies for a SurveyDataset.

    Convenience wrapper around :class:`ProxyCalculator`; see
    :meth:`ProxyCalculator.compute`.
    """
    return ProxyCalculator(dataset, fished=fished, aggregate=aggregate).compute(proxies)
