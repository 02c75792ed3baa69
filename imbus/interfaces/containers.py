# imbus/interfaces/containers.py

"""
SurveyDataset container for the proxy pipeline.

This module defines the SurveyDataset class that bundles the four survey
tables with their column configuration into a single, validated, immutable
container. Every proxy calculation takes a SurveyDataset as its input.

Design principles:
- Immutable after construction (frozen dataclass); no calculation writes
  back into the tables it reads
- Validation runs automatically in __post_init__
- Optional tables default to empty DataFrames
"""

import logging
import pandas as pd
from dataclasses import dataclass, field
from typing import Dict, Optional, Any, Iterable

from ..config import FieldConfig
from ..constants import PROXY_NAMES
from ..validation import InvalidDatasetError, unmatched_references

logger = logging.getLogger(__name__)


def _empty_df() -> pd.DataFrame:
    """Factory for creating empty DataFrames (used for optional tables)."""
    return pd.DataFrame()


@dataclass(frozen=True, eq=False)
class SurveyDataset:
    """
    Survey tables used to calculate F and effort proxies.

    Attributes
    ----------
    effort : pd.DataFrame
        Swept-area effort. Columns (via config): time, spatial unit, gear,
        swept area. Must not be empty.
    spatial : pd.DataFrame
        Spatial units and their areas. Columns: spatial unit, area.
        Must not be empty.
    species : pd.DataFrame
        Species distribution (optional). Columns: species, age, spatial unit,
        time, relative abundance.
    gear_efficiency : pd.DataFrame
        Gear efficiency by species and age (optional), wide: one column per
        gear in addition to species and age.
    config : FieldConfig
        Column-name mapping.
    metadata : dict
        Free-form metadata (survey name, source directory, ...).

    Examples
    --------
    >>> data = SurveyDataset(effort=effort_df, spatial=spatial_df)
    >>> feff = data.compute_feff(fished=True, aggregate=True)
    >>> result = data.compute_proxies(proxies=['Feff', 'Fdist'])

    Raises
    ------
    InvalidDatasetError
        If effort or spatial is empty.
    """
    effort: pd.DataFrame
    spatial: pd.DataFrame
    species: pd.DataFrame = field(default_factory=_empty_df)
    gear_efficiency: pd.DataFrame = field(default_factory=_empty_df)
    config: FieldConfig = field(default_factory=FieldConfig)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Validate table presence and configuration.

        Checks:
        - effort and spatial tables are DataFrames with at least one row
        - optional tables are DataFrames
        - effort spatial units exist in the spatial table (warning only)

        Raises
        ------
        InvalidDatasetError
            If a table is missing, not a DataFrame, or a required one is empty.
        """
        for name in ("effort", "spatial", "species", "gear_efficiency"):
            if not isinstance(getattr(self, name), pd.DataFrame):
                raise InvalidDatasetError(
                    name, f"expected a pandas DataFrame, got {type(getattr(self, name)).__name__}"
                )
        if not isinstance(self.config, FieldConfig):
            raise InvalidDatasetError("config", "expected a FieldConfig")

        if self.effort.empty:
            raise InvalidDatasetError("effort", "effort table cannot be empty")
        if self.spatial.empty:
            raise InvalidDatasetError("spatial", "spatial table cannot be empty")

        spatial_field = self.config.spatial_field
        unknown = unmatched_references(self.effort, self.spatial, spatial_field, spatial_field)
        if unknown:
            logger.warning(
                "%d spatial unit(s) in effort are absent from the spatial table "
                "and will get a missing Feff: %s", len(unknown), unknown[:10]
            )

    @property
    def has_species(self) -> bool:
        return not self.species.empty

    @property
    def has_gear_efficiency(self) -> bool:
        return not self.gear_efficiency.empty

    # ------------------------------------------------------------------
    # Calculations
    # ------------------------------------------------------------------

    def compute_feff(self, fished: bool = True, aggregate: bool = True) -> pd.DataFrame:
        """Effort-based proxy table; see :func:`imbus.proxies.feff.calc_feff`."""
        from ..proxies.feff import calc_feff
        return calc_feff(self, fished=fished, aggregate=aggregate)

    def compute_proxies(
        self,
        proxies: Optional[Iterable[str]] = None,
        fished: bool = True,
        aggregate: bool = True,
    ):
        """F proxies for this dataset; see :func:`imbus.proxies.calculator.compute_proxies`."""
        from ..proxies.calculator import compute_proxies
        return compute_proxies(
            self,
            proxies=PROXY_NAMES if proxies is None else proxies,
            fished=fished,
            aggregate=aggregate,
        )

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    @classmethod
    def from_directory(cls, data_dir: str, config: Optional[FieldConfig] = None) -> 'SurveyDataset':
        """
        Load a SurveyDataset from a directory of CSV files.

        Parameters
        ----------
        data_dir : str
            Directory with effort.csv and spatial.csv, and optionally
            species.csv, gear_efficiency.csv and config.yaml.
        config : FieldConfig, optional
            Column mapping; overrides any config.yaml in the directory.

        Raises
        ------
        FileNotFoundError
            If a required CSV file is missing.
        InvalidDatasetError
            If validation fails.
        """
        from .utilities import SurveyDataLoader
        return SurveyDataLoader.from_directory(data_dir, config=config)

    def export_to_directory(self, data_dir: str) -> None:
        """Export the tables and config to CSV/YAML files in data_dir."""
        from .utilities import SurveyDataExporter
        SurveyDataExporter.to_directory(self, data_dir)

    def __repr__(self) -> str:
        return (
            f"SurveyDataset(effort={len(self.effort)} rows, spatial={len(self.spatial)} rows, "
            f"species={len(self.species)} rows, gear_efficiency={len(self.gear_efficiency)} rows)"
        )
