# imbus/proxies/padding.py

"""
Completion of the species-distribution and gear-efficiency tables.

Two missing-value policies apply, depending on what a gap means:

- A species age absent from a survey cell means the age was not caught
  there: relative abundance is zero-filled (pad_ages).
- A species age absent from the gear-efficiency table means efficiency was
  not estimated for it: the last estimate at a younger age is carried
  forward (pad_gear_efficiency).
"""

import logging
import numpy as np
import pandas as pd

from ..config import FieldConfig
from ..validation import require_columns, unmatched_tuples
from .reshape import gear_columns

logger = logging.getLogger(__name__)


def pad_ages(species: pd.DataFrame, config: FieldConfig) -> pd.DataFrame:
    """
    Complete the (spatial unit x age) grid of each species and year.

    For each species the age range [min, max] of its observed ages is taken.
    Each (species, year) group is then expanded to every spatial unit seen in
    that group crossed with every age in the range, and relative abundance is
    set to 0 where there was no observation.

    Parameters
    ----------
    species : pd.DataFrame
        Species distribution: species, time, spatial unit, age, abundance.
    config : FieldConfig
        Column-name mapping.

    Returns
    -------
    pd.DataFrame
        Columns: species, time, spatial unit, age, abundance, sorted by the
        first four. Rows with a missing age are not carried over, and any
        other column of the input is dropped.

    Raises
    ------
    MissingColumnError
        If species lacks a required column.
    """
    require_columns(species, config.species_columns, "species")
    sp_field, time_field = config.species_field, config.time_field
    spatial_field, age_field = config.spatial_field, config.age_field
    abundance_field = config.abundance_field
    keys = [sp_field, time_field, spatial_field, age_field]

    species = species[keys + [abundance_field]]
    observed = species.dropna(subset=[age_field]).astype({age_field: "int64"})

    pieces = []
    for sp, sloop in species.groupby(sp_field, sort=True):
        ages = sloop[age_field].dropna()
        if ages.empty:
            logger.warning("Species %s has no observed ages; dropped from the distribution", sp)
            continue
        all_ages = np.arange(int(ages.min()), int(ages.max()) + 1, dtype="int64")
        sp_observed = observed[observed[sp_field] == sp]

        for yr, yloop in sloop.groupby(time_field, sort=True):
            grid = pd.MultiIndex.from_product(
                [[sp], [yr], yloop[spatial_field].dropna().unique(), all_ages],
                names=keys,
            ).to_frame(index=False)
            yloop_observed = sp_observed[sp_observed[time_field] == yr]
            padded = grid.merge(yloop_observed, on=keys, how="left")
            padded[abundance_field] = padded[abundance_field].fillna(0)
            pieces.append(padded)

    if not pieces:
        return pd.DataFrame(columns=keys + [abundance_field])

    result = pd.concat(pieces, ignore_index=True)
    result = result.sort_values(keys, kind="mergesort").reset_index(drop=True)
    logger.debug("Padded species distribution from %d to %d rows", len(species), len(result))
    return result


def pad_gear_efficiency(gear_efficiency: pd.DataFrame, species: pd.DataFrame,
                        config: FieldConfig) -> pd.DataFrame:
    """
    Add missing species ages to gear efficiency and carry estimates forward.

    If a species table is given, every (species, age) pair it holds that is
    absent from the efficiency table is appended with missing efficiency for
    every gear, and the table is sorted by species then age. Within each
    species each gear column is then forward-filled along age. Ages before
    the first estimate stay missing.

    Parameters
    ----------
    gear_efficiency : pd.DataFrame
        Wide gear efficiency: species, age and one column per gear.
    species : pd.DataFrame
        Species distribution defining the wanted ages; may be empty.
    config : FieldConfig
        Column-name mapping.

    Returns
    -------
    pd.DataFrame
        Padded and filled gear efficiency, same columns as the input.
    """
    sp_field, age_field = config.species_field, config.age_field
    require_columns(gear_efficiency, config.gear_efficiency_keys, "gear efficiency")
    gears = gear_columns(gear_efficiency, config)
    table = gear_efficiency.copy()

    if species is not None and not species.empty:
        require_columns(species, [sp_field, age_field], "species")
        absent = unmatched_tuples(species, gear_efficiency, [sp_field, age_field], [sp_field, age_field])
        if absent:
            rows = pd.DataFrame(absent, columns=[sp_field, age_field])
            for gear in gears:
                rows[gear] = np.nan
            table = pd.concat([table, rows], ignore_index=True)
            logger.debug("Added %d species ages missing from gear efficiency", len(absent))
        table = table.sort_values([sp_field, age_field], kind="mergesort").reset_index(drop=True)

    if gears:
        table[gears] = table.groupby(sp_field, sort=False, dropna=False)[gears].ffill()
    return table
