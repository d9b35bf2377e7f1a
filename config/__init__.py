"""
Configuration package for geobuffer.

This package contains configuration loading and validation.

Modules:
    config_loader: Load buffer settings from JSON
"""

__version__ = '1.0.0'
