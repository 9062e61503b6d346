"""
KWIC Search Application Package

Keyword-in-context search over tables of documents: every occurrence of a
keyword centred in a fixed token window, with metadata carried along.
"""

__version__ = "1.0.0"

from .core.errors import KwicError, SchemaError, InvalidArgumentError
from .core.table import Table
from .core.kwic import extract_kwic
from .utils.batching import split_into_batches

__all__ = [
    'KwicError',
    'SchemaError',
    'InvalidArgumentError',
    'Table',
    'extract_kwic',
    'split_into_batches'
]
