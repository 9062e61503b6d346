"""
Core functionality module for the KWIC search system.

Contains the table container, text processing, KWIC extraction, and file management components.
"""

from .errors import KwicError, SchemaError, InvalidArgumentError
from .table import Table
from .text_processor import tokenize, ngrams, contains_keyword, justify
from .kwic import extract_kwic, find_matches, count_matches, normalize_window, output_columns
from .file_manager import load_documents, save_results

__all__ = [
    'KwicError',
    'SchemaError',
    'InvalidArgumentError',
    'Table',
    'tokenize',
    'ngrams',
    'contains_keyword',
    'justify',
    'extract_kwic',
    'find_matches',
    'count_matches',
    'normalize_window',
    'output_columns',
    'load_documents',
    'save_results'
]
