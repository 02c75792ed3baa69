# tests/conftest.py

"""
Shared fixtures for proxy tests.

Provides small survey tables with hand-checkable values:

Spatial units: A1 (100 km2), A2 (200 km2), A3 (50 km2, never fished)

Effort (raw):                      Aggregated Feff:
    OTB A1 2020 30 + 20 = 50           0.50
    OTB A2 2020 40                     0.20
    TBB A1 2020 10                     0.10
    OTB A1 2021 25                     0.25

Species COD, ages 1-3:
    2020 A1 age 1 R 0.6
    2020 A2 age 3 R 0.4
    2021 A1 age 2 R 1.0

Gear efficiency (COD):
    age 2: OTB 0.5, TBB 0.8
    age 3: OTB 0.7, TBB missing
"""

import numpy as np
import pandas as pd
import pytest

from imbus.config import FieldConfig
from imbus.interfaces import SurveyDataset


# =============================================================================
# Table Fixtures
# =============================================================================

@pytest.fixture
def config():
    """Default column mapping."""
    return FieldConfig()


@pytest.fixture
def spatial_df():
    return pd.DataFrame({
        "StatRec": ["A1", "A2", "A3"],
        "AREA_KM2": [100.0, 200.0, 50.0],
    })


@pytest.fixture
def effort_df():
    return pd.DataFrame({
        "Year": [2020, 2020, 2020, 2020, 2021],
        "StatRec": ["A1", "A1", "A2", "A1", "A1"],
        "Regulated_gear": ["OTB", "OTB", "OTB", "TBB", "OTB"],
        "SweptArea_KM2": [30.0, 20.0, 40.0, 10.0, 25.0],
        "Vessel": ["v1", "v2", "v1", "v3", "v1"],
    })


@pytest.fixture
def species_df():
    return pd.DataFrame({
        "Code": ["COD", "COD", "COD"],
        "Year": [2020, 2020, 2021],
        "StatRec": ["A1", "A2", "A1"],
        "Age": [1, 3, 2],
        "R": [0.6, 0.4, 1.0],
    })


@pytest.fixture
def gear_eff_df():
    return pd.DataFrame({
        "Code": ["COD", "COD"],
        "Age": [2, 3],
        "OTB": [0.5, 0.7],
        "TBB": [0.8, np.nan],
    })


# =============================================================================
# Dataset Fixtures
# =============================================================================

@pytest.fixture
def effort_only_data(effort_df, spatial_df):
    """Dataset with effort and spatial tables only."""
    return SurveyDataset(effort=effort_df, spatial=spatial_df)


@pytest.fixture
def gear_data(effort_df, spatial_df, gear_eff_df):
    """Dataset with gear efficiency but no species distribution."""
    return SurveyDataset(effort=effort_df, spatial=spatial_df, gear_efficiency=gear_eff_df)


@pytest.fixture
def species_data(effort_df, spatial_df, species_df):
    """Dataset with species distribution but no gear efficiency."""
    return SurveyDataset(effort=effort_df, spatial=spatial_df, species=species_df)


@pytest.fixture
def full_data(effort_df, spatial_df, species_df, gear_eff_df):
    """Dataset with all four tables."""
    return SurveyDataset(
        effort=effort_df,
        spatial=spatial_df,
        species=species_df,
        gear_efficiency=gear_eff_df,
    )


@pytest.fixture
def survey_dir(tmp_path, effort_df, spatial_df, species_df, gear_eff_df):
    """Directory holding all four tables as CSV files."""
    data_dir = tmp_path / "survey"
    data_dir.mkdir()
    effort_df.to_csv(data_dir / "effort.csv", index=False)
    spatial_df.to_csv(data_dir / "spatial.csv", index=False)
    species_df.to_csv(data_dir / "species.csv", index=False)
    gear_eff_df.to_csv(data_dir / "gear_efficiency.csv", index=False)
    return data_dir
