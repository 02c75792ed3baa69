# imbus/proxies/feff.py

"""
Effort-based fishing mortality proxy (Feff).

Feff = swept area / spatial-unit area. This is the basic proxy every other
proxy builds on.
"""

import logging
import numpy as np
import pandas as pd

from ..config import FieldConfig
from ..constants import FEFF
from ..validation import require_columns
from .effort import aggregate_effort, complete_grid

logger = logging.getLogger(__name__)


def compute_feff(effort: pd.DataFrame, spatial: pd.DataFrame,
                 config: FieldConfig) -> pd.DataFrame:
    """
    Join effort onto spatial-unit areas and compute Feff.

    Parameters
    ----------
    effort : pd.DataFrame
        Effort table with gear, spatial unit, time and swept area columns.
    spatial : pd.DataFrame
        Spatial table with spatial unit and area columns.
    config : FieldConfig
        Column-name mapping.

    Returns
    -------
    pd.DataFrame
        Effort columns plus area and ``Feff``. Effort rows whose spatial unit
        is not in the spatial table are kept with missing area and Feff.

    Raises
    ------
    MissingColumnError
        If either table lacks a required column. Effort is checked first.

    Notes
    -----
    Feff is missing (NaN), never infinite, wherever the area is zero,
    negative, missing or non-finite.
    Area and Feff columns already on the effort table are replaced.
    """
    require_columns(effort, config.effort_columns, "effort")
    require_columns(spatial, config.spatial_columns, "spatial")
    spatial_field, area_field = config.spatial_field, config.area_field

    areas = spatial[[spatial_field, area_field]]
    duplicated = areas[spatial_field].duplicated()
    if duplicated.any():
        logger.warning(
            "Spatial table has %d duplicated spatial unit(s); keeping the first area for: %s",
            int(duplicated.sum()), sorted(areas.loc[duplicated, spatial_field].unique(), key=str)[:10]
        )
        areas = areas[~duplicated]

    feff = effort.drop(columns=[area_field, FEFF], errors="ignore").merge(areas, on=spatial_field, how="left")

    swept = pd.to_numeric(feff[config.swept_area_field], errors="coerce").to_numpy(dtype=float)
    area = pd.to_numeric(feff[area_field], errors="coerce").to_numpy(dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = swept / area
    valid = np.isfinite(ratio) & np.isfinite(area) & (area > 0)
    feff[FEFF] = np.where(valid, ratio, np.nan)

    n_missing = int((~valid).sum())
    if n_missing:
        logger.debug("Feff missing for %d of %d rows", n_missing, len(feff))
    return feff


def calc_feff(dataset, fished: bool = True, aggregate: bool = True) -> pd.DataFrame:
    """
    Calculate Feff for a SurveyDataset.

    Parameters
    ----------
    dataset : SurveyDataset
        Dataset holding effort and spatial tables.
    fished : bool, optional
        If True (default), only fished cells are reported. If False, every
        spatial unit is reported for every observed gear and time, with
        unfished cells at swept area 0 and Feff 0.
    aggregate : bool, optional
        If True (default), sum swept area to gear, spatial unit and time.

    Returns
    -------
    pd.DataFrame
        Columns: gear, spatial unit, time, swept area, area, Feff.

    Examples
    --------
    >>> feff = calc_feff(data, fished=False)
    >>> feff[['StatRec', 'Feff']].head()
    """
    config = dataset.config
    require_columns(dataset.effort, config.effort_columns, "effort")
    require_columns(dataset.spatial, config.spatial_columns, "spatial")
    effort = aggregate_effort(dataset.effort, config, aggregate=aggregate)
    effort = complete_grid(effort, dataset.spatial, config, fished=fished)
    feff = compute_feff(effort, dataset.spatial, config)
    logger.info("Calculated Feff for %d cells (fished=%s, aggregate=%s)", len(feff), fished, aggregate)
    return feff
