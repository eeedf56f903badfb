"""
Run configuration.

Built-in defaults mirror config/default.yaml; a YAML file overrides any of them.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .segmented_sieve import DEFAULT_WINDOW

DEFAULT_CONFIG: Dict[str, Any] = {
    'window': DEFAULT_WINDOW,
    'verify_limits': [0, 1, 2, 3, 9, 10, 30, 97, 1000, 65537, 1000000],
    'benchmark_limits': [100000, 1000000, 10000000],
    'bounds_sample': [1, 5, 6, 100, 10000],
    'output_dir': 'data/results',
}


def _check_int_list(key: str, values, minimum: int):
    if not isinstance(values, list):
        raise ValueError(f"config '{key}' must be a list, got {values!r}")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int) or v < minimum:
            raise ValueError(f"config '{key}' entries must be integers >= {minimum}, got {v!r}")


def validate_config(config: Dict[str, Any]):
    """Raise ValueError if any value is unusable."""
    window = config['window']
    if isinstance(window, bool) or not isinstance(window, int) or window < 1:
        raise ValueError(f"config 'window' must be a positive integer, got {window!r}")
    _check_int_list('verify_limits', config['verify_limits'], 0)
    _check_int_list('benchmark_limits', config['benchmark_limits'], 0)
    _check_int_list('bounds_sample', config['bounds_sample'], 1)
    if not isinstance(config['output_dir'], str):
        raise ValueError(f"config 'output_dir' must be a string, got {config['output_dir']!r}")


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration, merging a YAML file over the defaults.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. If None, the defaults are returned.

    Returns
    -------
    dict
        Complete, validated configuration.
    """
    config = dict(DEFAULT_CONFIG)
    if path is not None:
        with open(path) as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{path}: expected a mapping at top level")
        unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
        if unknown:
            raise ValueError(f"{path}: unknown config keys {unknown}")
        config.update(loaded)

    validate_config(config)
    return config
