"""
Configuration loading for geobuffer.

This module handles loading and validation of the buffer configuration JSON file.

Constants:
    PROJECT_ROOT: Root directory of the project
    CONFIG_DIR: Configuration files directory
    OUTPUT_DIR: Output files directory

Functions:
    load_config: Load and validate configuration from JSON
    load_buffer_settings: Buffer settings merged over defaults
"""

import json
from pathlib import Path
from typing import Dict, Optional

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_DIR = PROJECT_ROOT / 'config'
OUTPUT_DIR = PROJECT_ROOT / 'outputs'

DEFAULT_BUFFER_SETTINGS = {
    'units': 'kilometers',
    'steps': 64,
    'earth_radius_meters': 6373000,
    'cap_style': 'round',
    'join_style': 'round',
    'mitre_limit': 5.0,
    'auto_repair_invalid': True,
    'distortion_warning_km': 500,
    'max_workers': 1
}


def load_config(config_path: Optional[Path] = None) -> Dict:
    """
    Load configuration from JSON file.

    Reads buffer_config.json (or `config_path`) and validates basic structure.

    Parameters:
    -----------
    config_path : Optional[Path]
        Configuration file, defaults to CONFIG_DIR/buffer_config.json

    Returns:
    --------
    Dict
        Configuration dictionary with a 'buffer_settings' key

    Raises:
    -------
    FileNotFoundError
        If configuration file doesn't exist
    json.JSONDecodeError
        If configuration file contains invalid JSON
    KeyError
        If required configuration keys are missing
    """
    if config_path is None:
        config_path = CONFIG_DIR / 'buffer_config.json'
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = json.load(f)

    if 'buffer_settings' not in config:
        raise KeyError("Configuration missing required 'buffer_settings' key")

    OUTPUT_DIR.mkdir(exist_ok=True)

    return config


def load_buffer_settings(config: Dict = None) -> Dict:
    """
    Load buffer settings from configuration.

    Args:
        config: Configuration dictionary (optional, will load if not provided)

    Returns:
        Dictionary with buffer settings

    Defaults:
        - units: 'kilometers'
        - steps: 64
        - earth_radius_meters: 6373000
        - cap_style / join_style: 'round'
        - mitre_limit: 5.0
        - auto_repair_invalid: True
        - distortion_warning_km: 500
        - max_workers: 1

    Note:
        Config values override defaults; missing keys keep their default.
    """
    if config is None:
        config = load_config()

    buffer_settings = config.get('buffer_settings', {})

    return {**DEFAULT_BUFFER_SETTINGS, **buffer_settings}
