"""
Utility modules for geobuffer.

Modules:
    logger: Logging configuration and setup
"""

__version__ = '1.0.0'
