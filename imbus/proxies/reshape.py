# imbus/proxies/reshape.py

"""
Long/wide reshaping of per-gear tables.

Per-gear values appear in two layouts:

    long   (id columns..., gear, value)      e.g. Feff by gear
    wide   (id columns..., gear_1, gear_2)   e.g. gear efficiency

A PivotSchema names the id columns, the discriminator column and the value
column explicitly, so a round trip never depends on how the wide columns
happen to be named.
"""

import logging
import pandas as pd
from dataclasses import dataclass
from typing import Sequence, Tuple, List

from ..config import FieldConfig
from ..constants import FEFF, EFFICIENCY
from ..validation import require_columns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PivotSchema:
    """
    Layout of a long/wide table pair.

    Attributes
    ----------
    id_columns : tuple of str
        Columns identifying a row in the wide layout.
    discriminator : str
        Long-layout column whose values become wide column names.
    value : str
        Long-layout column holding the values.
    """
    id_columns: Tuple[str, ...]
    discriminator: str
    value: str

    def to_wide(self, df: pd.DataFrame, categories: Sequence) -> pd.DataFrame:
        """
        Spread ``value`` into one column per category.

        Rows whose discriminator is not in ``categories`` are ignored. A
        category without any row still gets an all-missing column. If several
        rows share an id and category, the first non-missing value is kept.
        """
        ids = list(self.id_columns)
        categories = list(categories)
        subset = df.loc[df[self.discriminator].isin(categories), ids + [self.discriminator, self.value]]

        if subset.duplicated(subset=ids + [self.discriminator]).any():
            logger.warning(
                "Multiple %s values per %s and %s; keeping the first",
                self.value, ids, self.discriminator
            )
        wide = (
            subset.groupby(ids + [self.discriminator], sort=True)[self.value]
            .first()
            .unstack(self.discriminator)
            .reindex(columns=categories)
            .reset_index()
        )
        wide.columns.name = None
        return wide

    def to_long(self, df: pd.DataFrame, categories: Sequence) -> pd.DataFrame:
        """
        Gather the category columns into (discriminator, value) rows.

        Every column other than the category columns is carried along as an
        id column. Rows come out ordered by the id columns, then by category
        in the order given.
        """
        categories = list(categories)
        keep = [col for col in df.columns if col not in categories]
        long = df.melt(
            id_vars=keep,
            value_vars=categories,
            var_name=self.discriminator,
            value_name=self.value,
        )
        order = pd.Categorical(long[self.discriminator], categories=categories, ordered=True)
        long = (
            long.assign(_order=order)
            .sort_values([col for col in self.id_columns if col in keep] + ["_order"], kind="mergesort")
            .drop(columns="_order")
            .reset_index(drop=True)
        )
        return long


def gear_columns(gear_efficiency: pd.DataFrame, config: FieldConfig) -> List[str]:
    """Gear columns of a wide gear-efficiency table: everything but species and age."""
    return [col for col in gear_efficiency.columns if col not in config.gear_efficiency_keys]


def melt_gear_efficiency(gear_efficiency: pd.DataFrame, config: FieldConfig) -> pd.DataFrame:
    """
    Convert wide gear efficiency to long form.

    Returns
    -------
    pd.DataFrame
        Columns: species, age, gear, ``Efficiency``.
    """
    require_columns(gear_efficiency, config.gear_efficiency_keys, "gear efficiency")
    schema = PivotSchema(
        id_columns=(config.species_field, config.age_field),
        discriminator=config.gear_field,
        value=EFFICIENCY,
    )
    return schema.to_long(gear_efficiency, gear_columns(gear_efficiency, config))


def combine_feff_species(feff: pd.DataFrame, species: pd.DataFrame,
                         gear_names: Sequence, config: FieldConfig) -> pd.DataFrame:
    """
    Attach per-gear Feff to every species distribution row.

    Feff is spread to one column per gear keyed by (spatial unit, time),
    left-joined onto the species table, then gathered back so each species
    row appears once per gear. A gear with no recorded effort in a cell gets
    Feff 0, not missing.

    Parameters
    ----------
    feff : pd.DataFrame
        Output of :func:`imbus.proxies.feff.calc_feff`.
    species : pd.DataFrame
        Species distribution, usually age-padded.
    gear_names : sequence
        Gears to carry over; rows for other gears are ignored.
    config : FieldConfig
        Column-name mapping.

    Returns
    -------
    pd.DataFrame
        Species columns plus gear and ``Feff``.
    """
    spatial_field, time_field, gear_field = config.spatial_field, config.time_field, config.gear_field
    require_columns(species, [spatial_field, time_field], "species")

    schema = PivotSchema(
        id_columns=(spatial_field, time_field),
        discriminator=gear_field,
        value=FEFF,
    )
    feff_wide = schema.to_wide(feff, gear_names)
    combined = species.merge(feff_wide, on=[spatial_field, time_field], how="left")

    keys = [config.species_field, time_field, spatial_field, config.age_field]
    long_schema = PivotSchema(
        id_columns=tuple(col for col in keys if col in species.columns),
        discriminator=gear_field,
        value=FEFF,
    )
    combined = long_schema.to_long(combined, gear_names)
    combined[FEFF] = combined[FEFF].fillna(0)
    logger.debug(
        "Combined %d species rows with %d gears into %d rows",
        len(species), len(list(gear_names)), len(combined)
    )
    return combined
