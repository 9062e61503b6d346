"""
Configuration module for the KWIC search system.

Contains column names, window defaults, and output settings.
"""

from .settings import (
    TEXT_COLUMN, DEFAULT_WINDOW, SEPARATOR, KWIC_COLUMNS,
    DEFAULT_OUTPUT, OUTPUT_FORMATS, DEFAULT_BATCH_SIZE
)

__all__ = [
    'TEXT_COLUMN',
    'DEFAULT_WINDOW',
    'SEPARATOR',
    'KWIC_COLUMNS',
    'DEFAULT_OUTPUT',
    'OUTPUT_FORMATS',
    'DEFAULT_BATCH_SIZE'
]
