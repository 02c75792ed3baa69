# imbus/constants.py

"""
Constants shared by the proxy calculations.

This module defines the proxy names, the column names the pipeline adds to
its output tables, and the default survey column names (ICES DATRAS /
VMS swept-area conventions) used when no explicit mapping is given.
"""

# Proxy names, in canonical order
FEFF = "Feff"
FGEAR = "Fgear"
FDIST = "Fdist"
FREALISED = "Frealised"

PROXY_NAMES = (FEFF, FGEAR, FDIST, FREALISED)

# Column added when gear efficiency is melted to long form
EFFICIENCY = "Efficiency"

# Default column names
DEFAULT_GEAR_FIELD = "Regulated_gear"
DEFAULT_SPATIAL_FIELD = "StatRec"
DEFAULT_TIME_FIELD = "Year"
DEFAULT_AREA_FIELD = "AREA_KM2"
DEFAULT_SWEPT_AREA_FIELD = "SweptArea_KM2"
DEFAULT_SPECIES_FIELD = "Code"
DEFAULT_AGE_FIELD = "Age"
DEFAULT_ABUNDANCE_FIELD = "R"

# Input file names used by the directory loader
EFFORT_CSV = "effort.csv"
SPATIAL_CSV = "spatial.csv"
SPECIES_CSV = "species.csv"
GEAR_EFFICIENCY_CSV = "gear_efficiency.csv"
CONFIG_YAML = "config.yaml"
