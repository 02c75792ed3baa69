# imbus/validation/__init__.py

from .schemas import (
    ImbusError,
    MissingColumnError,
    NoComputableProxyError,
    InvalidDatasetError,
    require_columns,
)
from .reference import unmatched_references, unmatched_tuples

__all__ = [
    'ImbusError',
    'MissingColumnError',
    'NoComputableProxyError',
    'InvalidDatasetError',
    'require_columns',
    'unmatched_references',
    'unmatched_tuples',
]
