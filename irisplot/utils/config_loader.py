"""
Configuration loader for YAML chart configuration files.
"""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union


DEFAULT_CONFIG: Dict[str, Any] = {
    'general': {
        'style': 'default',
        'color_palette': 'tab10',
        'dpi': 100,
        'save_format': 'svg',
        'save_dir': 'charts',
    },
    'data': {
        'columns': {},
        'species': None,
    },
    'chart': {
        'layout': 'wide',
        'point_radius': 5,
        'box_fill': '#69b3a2',
        'box_padding': 0.2,
        'legend_spacing': 20,
    },
    'analysis': {
        'value_column': 'petal_length',
    },
    'validation': {
        'require_known_species': True,
        'allow_negative': False,
    },
}


def merge_config(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Recursively merge ``override`` into a copy of ``base``.

    Parameters
    ----------
    base : dict
        Base configuration
    override : dict, optional
        Values taking precedence over ``base``

    Returns
    -------
    dict
        Merged configuration
    """
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigLoader:
    """
    Load and parse YAML chart configuration files.
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize config loader.

        Parameters
        ----------
        config_path : str or Path
            Path to YAML configuration file
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

    def load(self, with_defaults: bool = True) -> Dict[str, Any]:
        """
        Load configuration from the YAML file.

        Parameters
        ----------
        with_defaults : bool
            Fill keys missing from the file with ``DEFAULT_CONFIG``

        Returns
        -------
        dict
            Configuration dictionary
        """
        with open(self.config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(
                f"Configuration root must be a mapping: {self.config_path}"
            )

        if with_defaults:
            return merge_config(DEFAULT_CONFIG, config)
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key, e.g. ``'chart.layout'``.

        Parameters
        ----------
        key : str
            Configuration key
        default : Any
            Value returned when the key is not found

        Returns
        -------
        Any
            Configuration value
        """
        value = self.load()

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @staticmethod
    def save(config: Dict[str, Any], config_path: Union[str, Path]) -> None:
        """
        Save configuration to a YAML file.

        Parameters
        ----------
        config : dict
            Configuration dictionary
        config_path : str or Path
            Destination path
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
