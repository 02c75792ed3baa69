# imbus/proxies/effort.py

"""
Effort preparation: aggregation and grid completion.

Both functions return new DataFrames and never modify their inputs.
"""

import logging
import pandas as pd

from ..config import FieldConfig
from ..validation import require_columns

logger = logging.getLogger(__name__)


def aggregate_effort(effort: pd.DataFrame, config: FieldConfig,
                     aggregate: bool = True) -> pd.DataFrame:
    """
    Reduce effort to (gear, spatial unit, time, swept area), optionally summed.

    Parameters
    ----------
    effort : pd.DataFrame
        Raw or pre-aggregated effort records.
    config : FieldConfig
        Column-name mapping.
    aggregate : bool, optional
        If True (default), sum swept area per (gear, spatial unit, time).
        Missing swept areas are skipped; a group of only missing values
        sums to 0. Rows with a missing key are dropped.

    Returns
    -------
    pd.DataFrame
        Columns: gear, spatial unit, time, swept area. When aggregated, rows
        are unique and sorted by key, so re-aggregation is the identity.

    Raises
    ------
    MissingColumnError
        If effort lacks a required column.
    """
    require_columns(effort, config.effort_columns, "effort")
    keys = [config.gear_field, config.spatial_field, config.time_field]
    swept = config.swept_area_field

    effort = effort[keys + [swept]]
    if not aggregate:
        return effort.reset_index(drop=True)

    summed = (
        effort.groupby(keys, as_index=False, sort=True)[swept]
        .sum(min_count=0)
    )
    logger.debug("Aggregated %d effort rows to %d cells", len(effort), len(summed))
    return summed[keys + [swept]]


def complete_grid(effort: pd.DataFrame, spatial: pd.DataFrame, config: FieldConfig,
                  fished: bool = True) -> pd.DataFrame:
    """
    Expand effort to every (spatial unit, gear, time) cell, zero-filling swept area.

    Parameters
    ----------
    effort : pd.DataFrame
        Effort as returned by :func:`aggregate_effort`.
    spatial : pd.DataFrame
        Spatial reference table; all of its spatial units enter the grid.
    config : FieldConfig
        Column-name mapping.
    fished : bool, optional
        If True (default) only fished cells are kept and effort is returned
        unchanged. If False, the grid is the cross-product of all spatial
        units x observed gears x observed times.

    Returns
    -------
    pd.DataFrame
        With ``fished=False``: one row per grid cell (for aggregated effort),
        columns spatial unit, gear, time, swept area.
    """
    if fished:
        return effort

    require_columns(spatial, [config.spatial_field], "spatial")
    spatial_field, gear_field, time_field = config.spatial_field, config.gear_field, config.time_field

    all_spatial = spatial[spatial_field].dropna().unique()
    all_gear = effort[gear_field].dropna().unique()
    all_time = effort[time_field].dropna().unique()

    grid = pd.MultiIndex.from_product(
        [all_spatial, all_gear, all_time],
        names=[spatial_field, gear_field, time_field],
    ).to_frame(index=False)

    completed = grid.merge(effort, on=[spatial_field, gear_field, time_field], how="left")
    completed[config.swept_area_field] = completed[config.swept_area_field].fillna(0)
    logger.debug(
        "Completed effort grid: %d spatial units x %d gears x %d times = %d cells",
        len(all_spatial), len(all_gear), len(all_time), len(grid)
    )
    return completed
