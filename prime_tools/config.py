"""
Run configuration.

Responsibility: load and validate the YAML config used by run_table.py.
"""

import numpy as np
import yaml
from pathlib import Path
from typing import Any, Dict

DEFAULTS = {
    'start': 1,
    'stop': 1001,
    'dtype': 'int',
    'output_dir': 'data/results',
    'verify': False,
}

DTYPES = {
    'int': int,
    'int64': np.int64,
    'int32': np.int32,
    'uint64': np.uint64,
}


def resolve_dtype(name: str):
    """Map a dtype name from the config to the integer type to compute with."""
    try:
        return DTYPES[name]
    except KeyError:
        raise ValueError(f"dtype: unknown integer type {name!r}, "
                         f"expected one of {sorted(DTYPES)}") from None


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a merged config.

    Raises
    ------
    ValueError
        Naming the offending key.
    """
    unknown = set(config) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"unknown config keys: {sorted(unknown)}")
    for key in ('start', 'stop'):
        if not isinstance(config[key], int) or isinstance(config[key], bool):
            raise ValueError(f"{key}: expected an integer, got {config[key]!r}")
    if config['start'] < 1:
        raise ValueError(f"start: must be >= 1, got {config['start']}")
    if config['stop'] <= config['start']:
        raise ValueError(f"stop: must be > start ({config['start']}), got {config['stop']}")
    if not isinstance(config['verify'], bool):
        raise ValueError(f"verify: expected true or false, got {config['verify']!r}")
    if not isinstance(config['output_dir'], str):
        raise ValueError(f"output_dir: expected a path, got {config['output_dir']!r}")
    resolve_dtype(config['dtype'])
    return config


def load_config(path=None) -> Dict[str, Any]:
    """
    Load a YAML config and merge it over DEFAULTS.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. Defaults only if None.

    Returns
    -------
    dict
        Validated config.
    """
    config = dict(DEFAULTS)
    if path is not None:
        with open(Path(path)) as f:
            config.update(yaml.safe_load(f) or {})
    return validate_config(config)
