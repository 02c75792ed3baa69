# imbus/interfaces/utilities.py

"""
Utility classes for loading and exporting SurveyDataset.

This module provides the local file I/O layer for the interfaces package:
- SurveyDataLoader: Load a SurveyDataset from a directory of CSV files
- SurveyDataExporter: Export a SurveyDataset to a directory of CSV files

Design notes:
- These utilities are separate from SurveyDataset to avoid circular imports
- effort.csv and spatial.csv are required; species.csv and
  gear_efficiency.csv are optional and load as empty DataFrames
- An optional config.yaml holds the column mapping (see FieldConfig)
"""

import logging
import pandas as pd
from pathlib import Path
from typing import Optional, Union

from ..config import FieldConfig
from ..constants import EFFORT_CSV, SPATIAL_CSV, SPECIES_CSV, GEAR_EFFICIENCY_CSV, CONFIG_YAML
from .containers import SurveyDataset

logger = logging.getLogger(__name__)


# =============================================================================
# Helper Functions for CSV I/O
# =============================================================================

def load_table_csv(path: Union[str, Path], required: bool = False) -> pd.DataFrame:
    """
    Load a survey table CSV file into a DataFrame.

    Parameters
    ----------
    path : str or Path
        Path to the CSV file.
    required : bool, optional
        If True, raise error when file missing (default: False).

    Returns
    -------
    pd.DataFrame
        Table contents; empty DataFrame if an optional file is missing or
        holds no data.

    Raises
    ------
    FileNotFoundError
        If required=True and file doesn't exist.
    """
    path = Path(path)

    if not path.exists():
        if required:
            raise FileNotFoundError(f"Required table file not found: {path}")
        return pd.DataFrame()

    try:
        return pd.read_csv(path)
    except pd.errors.EmptyDataError:
        logger.warning("Table file %s is empty", path)
        return pd.DataFrame()


def save_table_csv(df: pd.DataFrame, path: Union[str, Path]) -> None:
    """Save a table to CSV without the index. Empty tables are skipped."""
    if df.empty:
        return
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)


# =============================================================================
# Loader and Exporter
# =============================================================================

class SurveyDataLoader:
    """Build SurveyDataset objects from files."""

    @staticmethod
    def from_directory(data_dir: Union[str, Path],
                       config: Optional[FieldConfig] = None) -> SurveyDataset:
        """
        Load a SurveyDataset from a directory.

        Parameters
        ----------
        data_dir : str or Path
            Directory with effort.csv and spatial.csv (required),
            species.csv and gear_efficiency.csv (optional), config.yaml
            (optional).
        config : FieldConfig, optional
            Column mapping; takes precedence over config.yaml.

        Returns
        -------
        SurveyDataset
            Validated dataset.

        Raises
        ------
        FileNotFoundError
            If the directory or a required file is missing.
        InvalidDatasetError
            If effort or spatial is empty.
        """
        data_path = Path(data_dir)
        if not data_path.is_dir():
            raise FileNotFoundError(f"Data directory not found: {data_dir}")

        if config is None:
            config_path = data_path / CONFIG_YAML
            config = FieldConfig.from_yaml(str(config_path)) if config_path.exists() else FieldConfig()

        dataset = SurveyDataset(
            effort=load_table_csv(data_path / EFFORT_CSV, required=True),
            spatial=load_table_csv(data_path / SPATIAL_CSV, required=True),
            species=load_table_csv(data_path / SPECIES_CSV),
            gear_efficiency=load_table_csv(data_path / GEAR_EFFICIENCY_CSV),
            config=config,
            metadata={"source": str(data_path)},
        )
        logger.info("Loaded %r from %s", dataset, data_path)
        return dataset


class SurveyDataExporter:
    """Write SurveyDataset objects to files."""

    @staticmethod
    def to_directory(dataset: SurveyDataset, data_dir: Union[str, Path]) -> None:
        """
        Export a SurveyDataset so that SurveyDataLoader can read it back.

        Optional tables that are empty are not written.
        """
        data_path = Path(data_dir)
        data_path.mkdir(parents=True, exist_ok=True)

        save_table_csv(dataset.effort, data_path / EFFORT_CSV)
        save_table_csv(dataset.spatial, data_path / SPATIAL_CSV)
        save_table_csv(dataset.species, data_path / SPECIES_CSV)
        save_table_csv(dataset.gear_efficiency, data_path / GEAR_EFFICIENCY_CSV)
        dataset.config.to_yaml(str(data_path / CONFIG_YAML))
        logger.info("Exported %r to %s", dataset, data_path)
