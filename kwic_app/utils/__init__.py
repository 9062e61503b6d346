"""
Utility modules for the KWIC search system.

Contains batching and CLI parsing utilities.
"""

from .batching import split_into_batches
from .cli_parser import parse_arguments, validate_arguments

__all__ = [
    'split_into_batches',
    'parse_arguments',
    'validate_arguments'
]
