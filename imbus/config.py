# imbus/config.py

"""
Column-name configuration for the survey tables.

FieldConfig maps each logical role (gear, spatial unit, time, ...) to the
physical column name used in the caller's tables. It is immutable and
validated on construction, so a SurveyDataset never sees a half-valid
mapping.

Example
-------
>>> config = FieldConfig(gear_field='Gear', spatial_field='ICESrect')
>>> config.effort_columns
['Year', 'ICESrect', 'Gear', 'SweptArea_KM2']
>>> config = FieldConfig.from_yaml('config.yaml')
"""

import os
import yaml
from dataclasses import dataclass, fields, asdict
from typing import Dict, Any, List, Mapping

from .constants import (
    DEFAULT_GEAR_FIELD,
    DEFAULT_SPATIAL_FIELD,
    DEFAULT_TIME_FIELD,
    DEFAULT_AREA_FIELD,
    DEFAULT_SWEPT_AREA_FIELD,
    DEFAULT_SPECIES_FIELD,
    DEFAULT_AGE_FIELD,
    DEFAULT_ABUNDANCE_FIELD,
)


@dataclass(frozen=True)
class FieldConfig:
    """
    Role to column-name mapping for effort, spatial, species and gear tables.

    Attributes
    ----------
    gear_field : str
        Gear type column (default: 'Regulated_gear').
    spatial_field : str
        Spatial unit column, an ICES statistical rectangle by default
        (default: 'StatRec').
    time_field : str
        Time column, usually the year (default: 'Year').
    area_field : str
        Spatial unit area in the spatial table (default: 'AREA_KM2').
    swept_area_field : str
        Swept area in the effort table (default: 'SweptArea_KM2').
    species_field : str
        Species code in species and gear-efficiency tables (default: 'Code').
    age_field : str
        Age in species and gear-efficiency tables (default: 'Age').
    abundance_field : str
        Relative abundance in the species table (default: 'R').

    Notes
    -----
    - All values must be non-empty strings
    - No two roles may map to the same column
    """
    gear_field: str = DEFAULT_GEAR_FIELD
    spatial_field: str = DEFAULT_SPATIAL_FIELD
    time_field: str = DEFAULT_TIME_FIELD
    area_field: str = DEFAULT_AREA_FIELD
    swept_area_field: str = DEFAULT_SWEPT_AREA_FIELD
    species_field: str = DEFAULT_SPECIES_FIELD
    age_field: str = DEFAULT_AGE_FIELD
    abundance_field: str = DEFAULT_ABUNDANCE_FIELD

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check every role maps to a distinct, non-blank column name.

        Raises
        ------
        ValueError
            If a value is not a string, is blank, or is shared by two roles.
        """
        seen: Dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{f.name} must be a non-empty string, got {value!r}")
            if value in seen:
                raise ValueError(
                    f"{f.name} and {seen[value]} both map to column '{value}'"
                )
            seen[value] = f.name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> 'FieldConfig':
        """
        Build a FieldConfig from a mapping; unspecified roles keep defaults.

        Raises
        ------
        ValueError
            If the mapping holds keys that are not FieldConfig options.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown field options: {unknown}. Expected some of: {sorted(known)}")
        return cls(**dict(mapping))

    @classmethod
    def from_yaml(cls, config_path: str) -> 'FieldConfig':
        """
        Load a FieldConfig from a YAML file.

        The options may sit at the top level or under a ``fields`` key.
        An empty file gives the default configuration.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        ValueError
            If the file does not hold a mapping or has unknown options.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        if "fields" in data:
            data = data["fields"] or {}
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_yaml(self, config_path: str) -> None:
        """Write the configuration as a YAML mapping under ``fields``."""
        with open(config_path, "w") as f:
            yaml.safe_dump({"fields": self.to_dict()}, f, sort_keys=False)

    # ------------------------------------------------------------------
    # Required columns per table
    # ------------------------------------------------------------------

    @property
    def effort_columns(self) -> List[str]:
        return [self.time_field, self.spatial_field, self.gear_field, self.swept_area_field]

    @property
    def spatial_columns(self) -> List[str]:
        return [self.spatial_field, self.area_field]

    @property
    def species_columns(self) -> List[str]:
        return [self.species_field, self.time_field, self.spatial_field,
                self.age_field, self.abundance_field]

    @property
    def gear_efficiency_keys(self) -> List[str]:
        """Identifier columns of the wide gear-efficiency table."""
        return [self.species_field, self.age_field]
