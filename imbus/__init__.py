# imbus/__init__.py

"""
IMBUS fishing-mortality proxies.

Derives fishing mortality (F) and fishing effort proxy indicators for
survey-based stock assessment from swept-area effort, the spatial reference
grid, and optionally species distribution and gear efficiency.

Main Components
---------------
FieldConfig : dataclass
    Role to column-name mapping for the input tables.
SurveyDataset : dataclass
    The validated, immutable container of input tables.
ProxyCalculator : class
    Computes Feff, Fgear, Fdist and Frealised.
run : function
    Unified entry point returning a validated ProxyResult.

Subpackages
-----------
proxies : Effort aggregation, grid completion, padding, reshaping, calculator
interfaces : Data containers and file I/O
validation : Error types and column/reference checks
logs : Log file setup

Example
-------
>>> from imbus import SurveyDataset, run
>>> data = SurveyDataset.from_directory('/path/to/survey')
>>> result = run(data, proxies=['Feff', 'Fdist'])
>>> result.table.head()
"""

from .config import FieldConfig
from .interfaces import SurveyDataset, ProxyResult, CalculationPath
from .proxies import ProxyCalculator, compute_proxies, calc_feff
from .run import run, run_from_directory
from .validation import (
    ImbusError,
    MissingColumnError,
    NoComputableProxyError,
    InvalidDatasetError,
)

__all__ = [
    # Core classes
    'FieldConfig',
    'SurveyDataset',
    'ProxyCalculator',
    # Calculation functions
    'calc_feff',
    'compute_proxies',
    'run',
    'run_from_directory',
    # Result containers
    'ProxyResult',
    'CalculationPath',
    # Errors
    'ImbusError',
    'MissingColumnError',
    'NoComputableProxyError',
    'InvalidDatasetError',
]

__version__ = '0.1.0'
