"""
Keyword-in-context extraction for the KWIC search system.

Lists every occurrence of a keyword centred in a fixed-width token window,
with the left and right context as separate justified columns.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Union
from ..config.settings import (
    TEXT_COLUMN, DEFAULT_WINDOW, SEPARATOR, SEPARATOR_COLUMNS, KWIC_COLUMNS,
    METADATA_SUFFIX, get_word_columns
)
from .errors import SchemaError, InvalidArgumentError
from .table import Table
from .text_processor import tokenize, ngrams, contains_keyword, compile_keyword, justify

TableLike = Union[Table, Iterable[Mapping[str, Any]]]

def normalize_window(window: int) -> int:
    """Round an odd window up to the next even size and check it is positive."""
    if isinstance(window, bool) or not isinstance(window, int):
        raise InvalidArgumentError(f"Window must be an integer, got {window!r}")
    if window % 2 != 0:
        window += 1
    if window <= 0:
        raise InvalidArgumentError(f"Window must be positive, got {window}")
    return window

def metadata_names(metadata_columns: List[str], window: int) -> Dict[str, str]:
    """Output name of each metadata column; names taken by generated columns get a suffix."""
    reserved = set(KWIC_COLUMNS) | set(get_word_columns(window))
    taken = set(metadata_columns) | reserved
    names = {}
    for col in metadata_columns:
        name = col
        if name in reserved:
            name = f"{col}{METADATA_SUFFIX}"
            while name in taken:
                name = f"{name}{METADATA_SUFFIX}"
            taken.add(name)
        names[col] = name
    return names

def output_columns(metadata_columns: List[str], window: int) -> List[str]:
    """Column schema of a match table."""
    renamed = metadata_names(metadata_columns, window)
    return list(KWIC_COLUMNS) + [renamed[col] for col in metadata_columns] + get_word_columns(window)

def _as_table(table: TableLike) -> Table:
    if isinstance(table, Table):
        return table
    return Table.from_records(table)

def _validate(table: TableLike, keyword: str, window: int):
    table = _as_table(table)
    if TEXT_COLUMN not in table.columns:
        raise SchemaError(f"Document table has no '{TEXT_COLUMN}' column")
    if not isinstance(keyword, str) or not keyword:
        raise InvalidArgumentError("Keyword must be a non-empty string")
    return table, normalize_window(window)

def find_matches(table: TableLike, keyword: str, window: int = DEFAULT_WINDOW,
                 regex: bool = False) -> List[Dict[str, Any]]:
    """
    Raw, unpadded matches in document order.

    Each match holds the index of its source document, the `pre`, `target`
    and `post` strings and the n-gram tokens. A record without text
    contributes nothing.
    """
    table, window = _validate(table, keyword, window)
    pattern = None
    if regex:
        try:
            pattern = compile_keyword(keyword)
        except re.error as e:
            raise InvalidArgumentError(f"Invalid keyword pattern {keyword!r}: {e}") from e

    half = window // 2
    matches = []
    for doc_index, row in enumerate(table.rows):
        for gram in ngrams(tokenize(row.get(TEXT_COLUMN)), window):
            if not contains_keyword(" ".join(gram), keyword, pattern):
                continue
            target = gram[half - 1]
            if not contains_keyword(target, keyword, pattern):
                continue
            matches.append({
                "document": doc_index,
                "pre": " ".join(gram[:half - 1]),
                "target": target,
                "post": " ".join(gram[half:]),
                "words": gram,
            })
    return matches

def count_matches(table: TableLike, keyword: str, window: int = DEFAULT_WINDOW,
                  regex: bool = False) -> List[int]:
    """Number of matches for each input document, in input order."""
    table = _as_table(table)
    counts = [0] * len(table)
    for match in find_matches(table, keyword, window, regex):
        counts[match["document"]] += 1
    return counts

def extract_kwic(table: TableLike, keyword: str, window: int = DEFAULT_WINDOW,
                 regex: bool = False) -> Table:
    """
    Keyword-in-context search over a document table.

    Every n-gram of `window` whitespace tokens whose target token (ordinal
    window/2) contains `keyword` becomes one output row: `pre` | `target` |
    `post`, followed by the document's metadata columns and the raw
    word1..wordN tokens. Widths are computed over the whole result set.
    Metadata columns named like a generated column get a `_meta` suffix.

    Raises SchemaError when there is no text column and InvalidArgumentError
    for an empty keyword, a non-positive window or an invalid pattern.
    """
    table, window = _validate(table, keyword, window)
    matches = find_matches(table, keyword, window, regex)

    word_columns = get_word_columns(window)
    metadata_columns = [col for col in table.columns if col != TEXT_COLUMN]
    renamed = metadata_names(metadata_columns, window)
    columns = output_columns(metadata_columns, window)

    if not matches:
        return Table(columns)

    pre = justify([m["pre"] for m in matches], "right")
    target = justify([m["target"] for m in matches], "centre")
    post = justify([m["post"] for m in matches], "left")

    rows = []
    for i, m in enumerate(matches):
        source = table.rows[m["document"]]
        out = {
            "pre": pre[i],
            SEPARATOR_COLUMNS[0]: SEPARATOR,
            "target": target[i],
            SEPARATOR_COLUMNS[1]: SEPARATOR,
            "post": post[i],
        }
        for col in metadata_columns:
            out[renamed[col]] = source.get(col)
        out.update(zip(word_columns, m["words"]))
        rows.append({col: out.get(col) for col in columns})

    return Table(columns, rows)
