# imbus/run.py

"""
Unified run interface for IMBUS proxy calculations.

Example
-------
>>> from imbus import SurveyDataset, run
>>> data = SurveyDataset.from_directory('/path/to/survey')
>>> result = run(data, proxies=['Feff', 'Fdist'], fished=False)
>>> result.table.head()
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import FieldConfig
from .constants import PROXY_NAMES
from .interfaces import SurveyDataset, ProxyResult
from .proxies import compute_proxies

logger = logging.getLogger(__name__)


def run(
    dataset: SurveyDataset,
    proxies: Iterable[str] = PROXY_NAMES,
    fished: bool = True,
    aggregate: bool = True,
) -> ProxyResult:
    """
    Compute proxies for a dataset and check the result.

    Parameters
    ----------
    dataset : SurveyDataset
        Input tables.
    proxies : iterable of str, optional
        Proxies to compute (default: all computable).
    fished : bool, optional
        Restrict Feff to fished cells (default: True).
    aggregate : bool, optional
        Sum swept area per gear, spatial unit and time (default: True).

    Returns
    -------
    ProxyResult
        Validated result.
    """
    result = compute_proxies(dataset, proxies=proxies, fished=fished, aggregate=aggregate)
    result.validate()
    logger.info("Run complete: proxies=%s, rows=%d", list(result.proxies), len(result))
    return result


# Convenience function to run from a data directory
def run_from_directory(
    data_dir: Union[str, Path],
    proxies: Iterable[str] = PROXY_NAMES,
    config: Optional[FieldConfig] = None,
    **kwargs
) -> ProxyResult:
    """
    Load a dataset from a directory and compute proxies.

    Parameters
    ----------
    data_dir : str or Path
        Directory with effort.csv, spatial.csv and optional tables.
    proxies : iterable of str, optional
        Proxies to compute.
    config : FieldConfig, optional
        Column mapping; defaults to the directory's config.yaml if present.
    **kwargs
        Additional arguments passed to run().
    """
    dataset = SurveyDataset.from_directory(str(data_dir), config=config)
    return run(dataset, proxies=proxies, **kwargs)
