# imbus/interfaces/__init__.py

"""
SurveyDataset interface module.

This module provides the validated input container shared by all proxy
calculations, the result container they return, and local file I/O.
"""

from .containers import SurveyDataset
from .results import ProxyResult, CalculationPath
from .utilities import (
    SurveyDataLoader,
    SurveyDataExporter,
    load_table_csv,
    save_table_csv,
)

__all__ = [
    # Input container
    'SurveyDataset',
    # Output container
    'ProxyResult',
    'CalculationPath',
    # Utilities
    'SurveyDataLoader',
    'SurveyDataExporter',
    # Helper functions
    'load_table_csv',
    'save_table_csv',
]
