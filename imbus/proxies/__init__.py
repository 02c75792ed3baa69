# imbus/proxies/__init__.py

"""
F-proxy calculation pipeline.

effort -> aggregate_effort -> complete_grid -> compute_feff
       -> (pad_ages, combine_feff_species, pad_gear_efficiency)
       -> ProxyCalculator
"""

from .effort import aggregate_effort, complete_grid
from .feff import compute_feff, calc_feff
from .availability import available_proxies, resolve_proxies
from .padding import pad_ages, pad_gear_efficiency
from .reshape import PivotSchema, combine_feff_species, melt_gear_efficiency, gear_columns
from .calculator import ProxyCalculator, compute_proxies

__all__ = [
    'aggregate_effort',
    'complete_grid',
    'compute_feff',
    'calc_feff',
    'available_proxies',
    'resolve_proxies',
    'pad_ages',
    'pad_gear_efficiency',
    'PivotSchema',
    'combine_feff_species',
    'melt_gear_efficiency',
    'gear_columns',
    'ProxyCalculator',
    'compute_proxies',
]
